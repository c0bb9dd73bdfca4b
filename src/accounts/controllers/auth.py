"""This module contains the controllers for the authentication app."""

import typing as t

import structlog
from ninja_extra import api_controller, route, status
from ninja_jwt.controller import TokenObtainPairController
from ninja_jwt.schema import TokenObtainPairInputSchema, TokenObtainPairOutputSchema

from accounts import schema
from accounts.models import ClubUser
from accounts.service import account as account_service
from accounts.service.auth import get_token_pair_for_user
from common.auth_base import BaseJWTAuth
from common.schema import ValidationErrorResponse
from common.throttling import AuthThrottle, UserRegistrationThrottle

logger = structlog.get_logger(__name__)


@api_controller("/auth", tags=["Auth"], throttle=AuthThrottle())
class AuthController(TokenObtainPairController):
    @route.post("/token/pair", response=TokenObtainPairOutputSchema, url_name="token_obtain_pair")
    def obtain_token(self, user_token: TokenObtainPairInputSchema) -> TokenObtainPairOutputSchema:
        """Log in with email (as `username`) and password to obtain JWT access/refresh tokens.

        Inactive accounts are rejected with 401.
        """
        user = t.cast(ClubUser, user_token._user)
        logger.info("user_login_succeeded", user_id=str(user.id))
        return get_token_pair_for_user(user)

    @route.post(
        "/register",
        url_name="register_account",
        response={201: schema.RegisterResponseSchema, 400: ValidationErrorResponse},
        throttle=UserRegistrationThrottle(),
    )
    def register(self, payload: schema.RegisterUserSchema) -> tuple[int, schema.RegisterResponseSchema]:
        """Sign up as a club member and receive a token pair.

        Returns 409 when the email is already registered.
        """
        user = account_service.register_user(payload)
        return status.HTTP_201_CREATED, schema.RegisterResponseSchema(
            user=schema.ClubUserSchema.from_orm(user), token=get_token_pair_for_user(user)
        )

    @route.get("/me", url_name="me", response=schema.ClubUserSchema, auth=BaseJWTAuth())
    def me(self) -> ClubUser:
        """Retrieve the authenticated user's profile."""
        return t.cast(ClubUser, self.context.request.user)  # type: ignore[union-attr]
