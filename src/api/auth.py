"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from src.api.dependencies import get_auth_service
from src.schemas.auth import EmailSignUpRequest, ErrorResponse, MessageResponse
from src.services.auth import AuthService
from src.services.errors import SignUpError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/signup",
    response_model=MessageResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}},
)
async def sign_up(
    request: Request,
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Sign up with email and password."""
    try:
        body = EmailSignUpRequest.model_validate_json(await request.body())
    except PydanticValidationError as e:
        logger.warning(f"Unable to parse sign up body: {e}")
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"error": "unable to parse request body"},
        )

    try:
        service.sign_up(body)
    except SignUpError as e:
        logger.info(f"Sign up rejected: {e.message}")
        # All sign-up failures share one status code
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": e.message},
        )

    return MessageResponse(message="sign up successful")
