# exceptions/parsers.py
"""
Errors raised while turning markup into records.
"""


class ParsingError(Exception):
    """
    A node or document could not be read into a record.

    Wraps the lower-level error (AttributeError, IndexError, ...) that caused
    it, when there is one.
    """

    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error is None:
            return self.message
        return f"{self.message} (caused by {type(self.original_error).__name__}: {self.original_error})"


class CategoryNotFoundError(ParsingError):
    """
    Every selector for a data category came back empty, or none of the
    matched nodes produced a record.

    Callers treat this as "category absent", never as a fatal error.
    """

    def __init__(self, category: str = "data"):
        super().__init__(f"No {category} found in markup content")
        self.category = category


class InsufficientDataError(ParsingError):
    """
    A matched node has fewer sub-fields (cells, slots) than a record needs.
    """

    def __init__(self, data_type: str, minimum_required: int, actual: int):
        """
        Args:
            data_type: What was counted, e.g. "cells in fixture row"
            minimum_required: Count the record needs
            actual: Count that was found
        """
        super().__init__(
            f"Expected at least {minimum_required} {data_type}, got {actual}"
        )
        self.data_type = data_type
        self.minimum_required = minimum_required
        self.actual = actual
