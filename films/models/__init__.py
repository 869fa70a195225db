from .films import Film

__all__ = ["Film"]
