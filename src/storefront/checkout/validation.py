"""Checkout form validation.

Each rule is checked independently, so a form can fail on several fields at
once. The email rule is a shape check only (something@something.something).
"""

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_NAME_LENGTH = 2
MIN_ADDRESS_LENGTH = 5


def is_valid_email(email) -> bool:
    return bool(email) and EMAIL_PATTERN.fullmatch(email) is not None


def validate_checkout(name, email, address) -> dict[str, str]:
    """Return field name -> message for every failing field; empty when valid."""
    errors = {}
    if not name or len(name.strip()) < MIN_NAME_LENGTH:
        errors["name"] = "Please enter your name"
    if not is_valid_email(email):
        errors["email"] = "Invalid email address"
    if not address or len(address.strip()) < MIN_ADDRESS_LENGTH:
        errors["address"] = "Please enter your address"
    return errors
