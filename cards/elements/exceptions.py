"""
Exceptions raised at the element builder boundary.

A builder either returns a complete element or raises one of these before
producing any output.
"""

from typing import Any, Optional, Tuple


class ElementError(Exception):
    """Base exception for rejected element input."""

    def __init__(self, message: str, element: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.element = element
        self.field = field

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.element:
            parts.append(f"Element: {self.element}")
        if self.field:
            parts.append(f"Field: {self.field}")
        return " | ".join(parts)


class InvalidEnumValue(ElementError):
    """An enum-restricted field received a value outside the enum's set."""

    def __init__(
        self,
        message: str,
        value: Any = None,
        allowed: Tuple[str, ...] = (),
        element: Optional[str] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message, element=element, field=field)
        self.value = value
        self.allowed = tuple(allowed)


class InvalidShape(ElementError):
    """A required field is missing, a field has the wrong kind, or the field is unknown."""
    pass
