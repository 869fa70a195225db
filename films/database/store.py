from threading import Lock
from typing import Dict, List
from common.exceptions import NotFoundError, ValidationError
from films.models.films import Film
from films.validation import FIELD_VALIDATORS, validate_film
import logging

logger = logging.getLogger(__name__)


class FilmStore:
    """In-memory film table.

    Ids start at 1 and are never reused. Every operation runs under the
    store lock and hands out copies, never the stored objects.
    """

    def __init__(self):
        self._films: Dict[int, Film] = {}
        self._next_id = 1
        self._lock = Lock()

    def create(self, film: Film) -> Film:
        validate_film(film)
        with self._lock:
            stored = film.model_copy(update={"id": self._next_id})
            self._next_id += 1
            self._films[stored.id] = stored
        logger.info(f"A new movie has been added: ID {stored.id}, {stored.name}")
        return stored.model_copy()

    def replace(self, film: Film) -> Film:
        with self._lock:
            self._check_exists(film.id)
            validate_film(film)
            stored = film.model_copy()
            self._films[stored.id] = stored
        logger.info(f"Updated movie ID {stored.id}: {stored.name}")
        return stored.model_copy()

    def patch(self, film: Film) -> Film:
        changes = {
            field: getattr(film, field)
            for field in FIELD_VALIDATORS
            if getattr(film, field) is not None
        }
        with self._lock:
            self._check_exists(film.id)
            for field, value in changes.items():
                FIELD_VALIDATORS[field](value)
            stored = self._films[film.id].model_copy(update=changes)
            self._films[stored.id] = stored
        logger.info(f"Patched movie ID {stored.id}, fields: {sorted(changes)}")
        return stored.model_copy()

    def list_all(self) -> List[Film]:
        with self._lock:
            return [film.model_copy() for film in self._films.values()]

    def _check_exists(self, film_id: int | None):
        if film_id is None:
            logger.error("Movie id is missing")
            raise ValidationError("Id must be provided", "id", film_id)
        if film_id not in self._films:
            logger.warning(f"Attempt to update a non-existent movie ID {film_id}")
            raise NotFoundError(f"Film with id = {film_id} was not found")


_store = FilmStore()


def get_store():
    return _store
