"""
Filter compiler exception hierarchy.

All exceptions inherit from ``FilterError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class FilterError(Exception):
    """Base exception for all filter compiler errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(FilterError):
    """Filter structure validation failed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class UnsupportedOperatorError(ValidationError):
    """
    Unknown operator in a filter leaf.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(
        self,
        operator: Any,
        valid_operators: list[str],
        path: str | None = None,
    ) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = (
            get_close_matches(operator, valid_operators, n=3, cutoff=0.6)
            if isinstance(operator, str)
            else []
        )

        message = f'Unsupported "operator": {operator}'
        if self.suggestions:
            message += f". Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message, path=path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "path": self.path,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class CoercionError(FilterError, ValueError):
    """A raw value cannot be interpreted under its declared type."""

    def __init__(self, message: str, value: Any, value_type: str) -> None:
        self.value = value
        self.value_type = value_type
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "COERCION_ERROR",
            "message": str(self),
            "value": repr(self.value),
            "type": self.value_type,
        }


class IdentifierError(FilterError):
    """A field name is not safe to embed as a SQL identifier."""

    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f"Invalid identifier: {identifier}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "IDENTIFIER_ERROR",
            "message": str(self),
            "identifier": self.identifier,
        }
