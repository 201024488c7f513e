"""Validation of sign-up requests."""

from pydantic import ValidationError as PydanticValidationError

from src.schemas.auth import EmailSignUpConstraints, EmailSignUpRequest
from src.services.errors import ValidationError


def _describe(error: dict) -> str:
    field = ".".join(str(part) for part in error["loc"])
    if error.get("input") == "":
        return f"{field} is required"
    return f"{field}: {error['msg']}"


def validate_sign_up_request(request: EmailSignUpRequest) -> None:
    """Check a decoded sign-up request against the field constraints.

    Raises ValidationError listing every failing field. The request itself is
    not modified, so the email is stored exactly as submitted.
    """
    try:
        EmailSignUpConstraints.model_validate(request.model_dump())
    except PydanticValidationError as e:
        raise ValidationError("; ".join(_describe(err) for err in e.errors())) from None
