"""Token issuing for authenticated club users."""

import structlog
from django.utils import timezone
from ninja_jwt.schema import TokenObtainPairOutputSchema
from ninja_jwt.tokens import RefreshToken

from accounts.models import ClubUser

logger = structlog.get_logger(__name__)


def get_token_pair_for_user(user: ClubUser) -> TokenObtainPairOutputSchema:
    """Get a token pair for the user, embedding the club role in the claims."""
    user.last_login = timezone.now()
    user.save(update_fields=["last_login"])

    logger.info("token_pair_generated", user_id=str(user.id))
    token = RefreshToken.for_user(user)
    token.payload.update(
        {
            "sub": str(user.id),
            "email": user.email,
            "name": user.display_name,
            "role": str(user.role),
        }
    )
    return TokenObtainPairOutputSchema(
        username=user.username,
        access=str(token.access_token),  # type: ignore[attr-defined]
        refresh=str(token),
    )
