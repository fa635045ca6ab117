"""Registered accounts, looked up by id or case-insensitive email."""

from storefront.account.user import User, normalize_email
from storefront.stores.port import RecordStore


class UserStore:
    def __init__(self, records: RecordStore):
        self._records = records

    def add_user(self, user: User) -> None:
        with self._records.transaction() as records:
            records.append(user.to_record())

    def list_users(self) -> list[User]:
        return [User.from_record(record) for record in self._records.read()]

    def find_by_email(self, email) -> User | None:
        wanted = normalize_email(email)
        if not wanted:
            return None
        return next((user for user in self.list_users() if user.email.lower() == wanted), None)

    def get_user(self, user_id) -> User | None:
        if not user_id:
            return None
        return next((user for user in self.list_users() if str(user.id) == str(user_id)), None)
