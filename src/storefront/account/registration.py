"""User registration — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String

from storefront.account.user import User
from storefront.checkout.validation import MIN_NAME_LENGTH, is_valid_email
from storefront.domain import storefront
from storefront.stores import get_stores
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


@storefront.command(part_of="User")
class RegisterUser:
    name = String(max_length=255, sanitize=False)
    email = String(max_length=254, sanitize=False)
    password = String(max_length=255, sanitize=False)
    confirm_password = String(max_length=255, sanitize=False)


def validate_registration(name, email, password, confirm_password) -> dict[str, str]:
    """Field name -> message for every failing rule, including a taken email."""
    errors = {}
    if not name or len(name.strip()) < MIN_NAME_LENGTH:
        errors["name"] = f"Name must be at least {MIN_NAME_LENGTH} characters"
    if not is_valid_email(email):
        errors["email"] = "Invalid email address"
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    elif len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        errors["password"] = "Password is too long"
    if password != confirm_password:
        errors["confirm_password"] = "Passwords do not match"

    if get_stores().users.find_by_email(email) is not None:
        errors["email"] = "Email is already registered"
    return errors


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        errors = validate_registration(command.name, command.email, command.password, command.confirm_password)
        if errors:
            raise ValidationError({field: [message] for field, message in errors.items()})

        user = User.register(name=command.name, email=command.email, password=command.password)
        get_stores().users.add_user(user)
        logger.info("user_registered", user_id=str(user.id))
        return str(user.id)
