"""User aggregate — a registered shopper who can sign in and own orders."""

from datetime import UTC, datetime

import bcrypt
from protean.fields import DateTime, String

from storefront.domain import storefront

BCRYPT_ROUNDS = 10


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def normalize_email(email) -> str:
    return (email or "").strip().lower()


@storefront.aggregate
class User:
    name = String(required=True, max_length=255, sanitize=False)
    email = String(required=True, max_length=254, sanitize=False)
    password_hash = String(required=True, max_length=255, sanitize=False)
    created_at = DateTime(required=True)

    @classmethod
    def register(cls, name, email, password):
        return cls(
            name=name.strip(),
            email=normalize_email(email),
            password_hash=hash_password(password),
            created_at=datetime.now(UTC),
        )

    def verify_password(self, password) -> bool:
        try:
            return bcrypt.checkpw((password or "").encode("utf-8"), self.password_hash.encode("utf-8"))
        except ValueError:
            # Stored hash is not a bcrypt hash
            return False

    @classmethod
    def from_record(cls, record):
        return cls(
            id=record["id"],
            name=record["name"],
            email=record["email"],
            password_hash=record["password_hash"],
            created_at=datetime.fromisoformat(record["created_at"]),
        )

    def to_record(self):
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "password_hash": self.password_hash,
            "created_at": self.created_at.isoformat(),
        }
