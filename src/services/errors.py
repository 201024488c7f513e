"""Errors raised by the sign-up flow.

Each error carries the message that is returned to the client.
"""


class SignUpError(Exception):
    """Base class for sign-up failures."""

    default_message = "sign up failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(SignUpError):
    """Missing or malformed request fields."""

    default_message = "invalid sign up request"


class PasswordMismatchError(SignUpError):
    """Password and confirmation differ."""

    default_message = "passwords do not match"


class EmailTakenError(SignUpError):
    """A user with the email already exists."""

    default_message = "user with provided email exists"


class InternalError(SignUpError):
    """Hashing or storage failure."""

    default_message = "unable to complete sign up"
