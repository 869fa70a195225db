from datetime import date
from common.exceptions import ValidationError
from users.models.users import User
import logging

logger = logging.getLogger(__name__)


def _reject(message: str, field: str, value) -> ValidationError:
    logger.error(f"Invalid user {field}, value={value!r}")
    return ValidationError(message, field, value)


def validate_email(email: str | None):
    if not email or "@" not in email:
        raise _reject('Email must not be empty and must contain "@"', "email", email)


def validate_login(login: str | None):
    if not login or " " in login:
        raise _reject("Login must not be empty and must not contain spaces", "login", login)


def validate_birthday(birthday: date | None):
    if birthday is None:
        raise _reject("Birthday must be set", "birthday", birthday)
    if birthday > date.today():
        raise _reject("Birthday must not be in the future", "birthday", birthday.isoformat())


FIELD_VALIDATORS = {
    "email": validate_email,
    "login": validate_login,
    "birthday": validate_birthday,
}


def validate_user(user: User):
    for field, validator in FIELD_VALIDATORS.items():
        validator(getattr(user, field))


def display_name(name: str | None, login: str) -> str:
    """Return the name to store, using the login when the name is blank."""
    if not name:
        logger.info(f"Name is not set, login will be used instead, login={login}")
        return login
    return name
