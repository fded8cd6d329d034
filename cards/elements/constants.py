"""
Enum registries for card text and image fields.

Each enum maps a semantic key (the member name) to the literal value the
Adaptive Card schema expects (the member value), e.g. ``TextColor.black`` is
``"dark"``. Members are ``str`` subclasses, so they can be placed straight
into an element and serialize as their literal value.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Type, Union

from cards.elements.base import Height, HorizontalAlignment, Spacing
from cards.elements.exceptions import InvalidEnumValue


class TextColor(str, Enum):
    """Text colors. Keys describe the color, values are the schema names."""

    default = "default"
    black = "dark"
    grey = "light"
    blue = "accent"
    green = "good"
    yellow = "warning"
    red = "attention"


class TextFontType(str, Enum):
    default = "default"
    monospace = "monospace"


class TextSize(str, Enum):
    default = "default"
    small = "small"
    medium = "medium"
    large = "large"
    xl = "extraLarge"


class TextWeight(str, Enum):
    default = "default"
    lighter = "lighter"
    bolder = "bolder"


class TextStyle(str, Enum):
    default = "default"
    heading = "heading"


class ImageSize(str, Enum):
    small = "small"
    medium = "medium"
    large = "large"
    stretch = "stretch"
    auto = "auto"


class ImageStyle(str, Enum):
    """Squared (``default``) or rounded (``person``) image."""

    default = "default"
    rounded = "person"


def _frozen(enum_cls: Type[Enum]) -> Mapping[str, str]:
    return MappingProxyType({member.name: member.value for member in enum_cls})


# =============================================================================
# READ-ONLY KEY -> VALUE VIEWS
# =============================================================================

TEXT_COLORS = _frozen(TextColor)
TEXT_FONT_TYPES = _frozen(TextFontType)
TEXT_SIZES = _frozen(TextSize)
TEXT_WEIGHTS = _frozen(TextWeight)
TEXT_STYLES = _frozen(TextStyle)
IMAGE_SIZES = _frozen(ImageSize)
IMAGE_STYLES = _frozen(ImageStyle)

ENUM_REGISTRY: Mapping[str, Type[Enum]] = MappingProxyType(
    {
        "TextColors": TextColor,
        "TextFontTypes": TextFontType,
        "TextSizes": TextSize,
        "TextWeights": TextWeight,
        "TextStyles": TextStyle,
        "ImageSizes": ImageSize,
        "ImageStyles": ImageStyle,
        "HAlign": HorizontalAlignment,
        "Spacing": Spacing,
        "Height": Height,
    }
)


def enum_values(enum_cls: Type[Enum]) -> Tuple[str, ...]:
    """Literal schema values of an enum, in declaration order."""
    return tuple(member.value for member in enum_cls)


def to_external(enum_cls: Type[Enum], key: Union[str, Enum]) -> str:
    """Map a semantic key (or a member) to the literal value the schema expects.

    Args:
        enum_cls: One of the registry enums, e.g. ``TextColor``
        key: Member name such as ``"black"``, or the member itself

    Returns:
        The literal value, e.g. ``"dark"``

    Raises:
        InvalidEnumValue: If ``key`` names no member of ``enum_cls``
    """
    if isinstance(key, enum_cls):
        return key.value
    try:
        return enum_cls[key].value
    except KeyError:
        raise InvalidEnumValue(
            f"'{key}' is not a {enum_cls.__name__} key; expected one of {list(enum_cls.__members__)}",
            value=key,
            allowed=tuple(enum_cls.__members__),
        ) from None


__all__ = [
    "TextColor",
    "TextFontType",
    "TextSize",
    "TextWeight",
    "TextStyle",
    "ImageSize",
    "ImageStyle",
    "TEXT_COLORS",
    "TEXT_FONT_TYPES",
    "TEXT_SIZES",
    "TEXT_WEIGHTS",
    "TEXT_STYLES",
    "IMAGE_SIZES",
    "IMAGE_STYLES",
    "ENUM_REGISTRY",
    "enum_values",
    "to_external",
]
