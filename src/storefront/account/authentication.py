"""Signing in: check credentials against the user store."""

from storefront.account.user import User
from storefront.stores import get_stores
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def authenticate(email, password) -> User | None:
    """Return the user when the email is registered and the password matches."""
    user = get_stores().users.find_by_email(email)
    if user is None or not user.verify_password(password):
        logger.info("login_failed")
        return None
    logger.info("login_succeeded", user_id=str(user.id))
    return user
