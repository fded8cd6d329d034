"""
Layout enums shared by every card element.

Alignment, spacing and height are common to all Adaptive Card elements, so
they live apart from the text and image registries in ``constants``.
"""

from enum import Enum


class HorizontalAlignment(str, Enum):
    """Horizontal placement of an element inside its container."""

    left = "left"
    center = "center"
    right = "right"


class Spacing(str, Enum):
    """Gap left between an element and the one above it."""

    default = "default"
    none = "none"
    small = "small"
    medium = "medium"
    large = "large"
    xl = "extraLarge"
    padding = "padding"


class Height(str, Enum):
    """Vertical sizing of an element."""

    auto = "auto"
    stretch = "stretch"


# Short name used throughout builder signatures and docs
HAlign = HorizontalAlignment


class CardBase:
    """Exposes the layout enums as attributes, e.g. ``elements.HAlign.left``.

    Instances have no ``__dict__``, so the registries cannot be shadowed.
    """

    __slots__ = ()

    HAlign = HorizontalAlignment
    Spacing = Spacing
    Height = Height


__all__ = [
    "HorizontalAlignment",
    "HAlign",
    "Spacing",
    "Height",
    "CardBase",
]
