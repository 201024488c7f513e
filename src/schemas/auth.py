"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class EmailSignUpRequest(BaseModel):
    """Sign-up request body as decoded from the wire.

    Missing fields decode to empty strings; the constraints are checked
    separately by the sign-up validator.
    """

    model_config = ConfigDict(extra="ignore")

    first_name: str = ""
    last_name: str = ""
    user_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""


class EmailSignUpConstraints(BaseModel):
    """Field constraints a sign-up request must satisfy."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    user_name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=32)
    confirm_password: str = Field(..., min_length=8)


class MessageResponse(BaseModel):
    """Generic acknowledgment."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned by the sign-up endpoint."""

    error: str
