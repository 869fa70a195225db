from .store import FilmStore, get_store

__all__ = ["FilmStore", "get_store"]
