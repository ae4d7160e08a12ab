"""Domain errors."""


class ValidationError(ValueError):
    """A message field violates one of the platform's constraints."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """
        Args:
            message: Human readable description of the violation
            field: Name of the offending field, if known
        """
        super().__init__(message)
        self.field = field
