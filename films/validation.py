from datetime import date
from common.config import CINEMA_BIRTH_DATE, DESCRIPTION_MAX_LENGTH
from common.exceptions import ValidationError
from films.models.films import Film
import logging

logger = logging.getLogger(__name__)


def _reject(message: str, field: str, value) -> ValidationError:
    logger.error(f"Invalid movie {field}, value={value!r}")
    return ValidationError(message, field, value)


def validate_name(name: str | None):
    if name is None or name == "":
        raise _reject("Film name must not be empty", "name", name)


def validate_description(description: str | None):
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        raise _reject(
            f"Film description must not be longer than {DESCRIPTION_MAX_LENGTH} characters",
            "description",
            description
        )


def validate_release_date(release_date: date | None):
    if release_date is None:
        raise _reject("Film release date must be set", "releaseDate", release_date)
    if release_date < CINEMA_BIRTH_DATE:
        raise _reject(
            f"Film release date must not be earlier than {CINEMA_BIRTH_DATE.isoformat()}",
            "releaseDate",
            release_date.isoformat()
        )


def validate_duration(duration: int | None):
    if duration is None or duration <= 0:
        raise _reject("Film duration must be positive", "duration", duration)


FIELD_VALIDATORS = {
    "name": validate_name,
    "description": validate_description,
    "release_date": validate_release_date,
    "duration": validate_duration,
}


def validate_film(film: Film):
    for field, validator in FIELD_VALIDATORS.items():
        validator(getattr(film, field))
