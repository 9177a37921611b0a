"""Exceptions raised by the matching engine and its collaborators."""

from typing import Any


class MatcherError(Exception):
    """Base class for drug name matcher errors."""


class InvalidInputError(MatcherError, ValueError):
    """A search argument has the wrong type or an out-of-range value."""

    def __init__(self, field: str, value: Any, reason: str = "invalid value") -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason} (got {value!r})")

    def to_details(self) -> dict:
        """Details payload for error responses."""
        return {"field": self.field, "value": repr(self.value), "reason": self.reason}


class CatalogUnavailableError(MatcherError):
    """The drug catalog could not be loaded or is empty.

    Raised by the catalog collaborator only; the engine itself never
    raises it.
    """
