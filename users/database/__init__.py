from .store import UserStore, get_store

__all__ = ["UserStore", "get_store"]
