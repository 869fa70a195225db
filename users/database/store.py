from threading import Lock
from typing import Dict, List
from common.exceptions import NotFoundError, ValidationError
from users.models.users import User
from users.validation import FIELD_VALIDATORS, display_name, validate_user
import logging

logger = logging.getLogger(__name__)


class UserStore:
    """In-memory user table, same contract as the film store."""

    def __init__(self):
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._lock = Lock()

    def create(self, user: User) -> User:
        validate_user(user)
        name = display_name(user.name, user.login)
        with self._lock:
            stored = user.model_copy(update={"id": self._next_id, "name": name})
            self._next_id += 1
            self._users[stored.id] = stored
        logger.info(f"Created new user with ID: {stored.id}")
        return stored.model_copy()

    def replace(self, user: User) -> User:
        with self._lock:
            self._check_exists(user.id)
            validate_user(user)
            stored = user.model_copy(update={"name": display_name(user.name, user.login)})
            self._users[stored.id] = stored
        logger.info(f"User fully updated, ID: {stored.id}")
        return stored.model_copy()

    def patch(self, user: User) -> User:
        changes = {
            field: getattr(user, field)
            for field in FIELD_VALIDATORS
            if getattr(user, field) is not None
        }
        with self._lock:
            self._check_exists(user.id)
            for field, value in changes.items():
                FIELD_VALIDATORS[field](value)
            current = self._users[user.id]
            if user.name is not None:
                changes["name"] = display_name(user.name, changes.get("login", current.login))
            stored = current.model_copy(update=changes)
            self._users[stored.id] = stored
        logger.info(f"Patched user ID {stored.id}, fields: {sorted(changes)}")
        return stored.model_copy()

    def list_all(self) -> List[User]:
        with self._lock:
            return [user.model_copy() for user in self._users.values()]

    def _check_exists(self, user_id: int | None):
        if user_id is None:
            logger.error("User id is missing")
            raise ValidationError("Id must be provided", "id", user_id)
        if user_id not in self._users:
            logger.error(f"User not found, ID: {user_id}")
            raise NotFoundError(f"User with id = {user_id} was not found")


_store = UserStore()


def get_store():
    return _store
