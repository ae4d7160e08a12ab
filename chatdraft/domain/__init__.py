from .errors import ValidationError

__all__ = ["ValidationError"]
