"""Errors raised by the inventory report."""


class InvalidInputError(ValueError):
    """Raised when report input is missing or, in strict mode, out of range."""

    def __init__(self, message: str, record_id: int | None = None):
        super().__init__(message)
        self.record_id = record_id
