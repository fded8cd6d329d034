"""
Elements - one object exposing every enum registry and element builder.

Usage:
    from cards.elements import get_elements

    elements = get_elements()
    card_body = [
        elements.text_block(text="Build finished", color=elements.TextColors.green),
        elements.image(url="https://example.com/chart.png", allow_zoom=True),
    ]
"""

import logging
from typing import Any, Iterable, Optional

from cards.card_types import (
    ImageElement,
    MediaElement,
    MediaSourceElement,
    PeopleIconElement,
    RichTextBlockElement,
    TextBlockElement,
    TextRunElement,
)
from cards.elements import builders, people
from cards.elements.base import CardBase
from cards.elements.constants import (
    ImageSize,
    ImageStyle,
    TextColor,
    TextFontType,
    TextSize,
    TextStyle,
    TextWeight,
)
from cards.elements.text import EmojiConverter, TextPreprocessor, get_text_preprocessor

logger = logging.getLogger(__name__)


class Elements(CardBase):
    """Builders for Adaptive Card elements with the enums they accept.

    Args:
        preprocessor: Text pipeline for TextBlock/TextRun text. Defaults to
            the global preprocessor.
        emoji_converter: Shortcut for a preprocessor built around a custom
            converter. Ignored when ``preprocessor`` is given.
    """

    __slots__ = ("_preprocessor",)

    TextColors = TextColor
    TextFontTypes = TextFontType
    TextSizes = TextSize
    TextWeights = TextWeight
    TextStyles = TextStyle
    ImageSizes = ImageSize
    ImageStyles = ImageStyle

    def __init__(
        self,
        preprocessor: Optional[TextPreprocessor] = None,
        emoji_converter: Optional[EmojiConverter] = None,
    ):
        if preprocessor is None and emoji_converter is not None:
            preprocessor = TextPreprocessor(converter=emoji_converter)
        self._preprocessor = preprocessor

    @property
    def preprocessor(self) -> TextPreprocessor:
        return self._preprocessor if self._preprocessor is not None else get_text_preprocessor()

    def text_block(self, **fields: Any) -> TextBlockElement:
        return builders.text_block(preprocessor=self.preprocessor, **fields)

    def text_run(self, **fields: Any) -> TextRunElement:
        return builders.text_run(preprocessor=self.preprocessor, **fields)

    def rich_text_block(self, **fields: Any) -> RichTextBlockElement:
        return builders.rich_text_block(**fields)

    def image(self, **fields: Any) -> ImageElement:
        return builders.image(**fields)

    def media(self, **fields: Any) -> MediaElement:
        return builders.media(**fields)

    def media_source(self, **fields: Any) -> MediaSourceElement:
        return builders.media_source(**fields)

    def user_icon(self, user: Any) -> PeopleIconElement:
        return people.user_icon(user)

    def user_icon_set(self, users: Iterable) -> PeopleIconElement:
        return people.user_icon_set(users)


_elements: Optional[Elements] = None


def get_elements() -> Elements:
    """Get the global Elements instance."""
    global _elements
    if _elements is None:
        _elements = Elements()
        logger.debug("Created global Elements instance")
    return _elements


def reset_elements():
    """Reset the global Elements instance."""
    global _elements
    _elements = None


__all__ = [
    "Elements",
    "get_elements",
    "reset_elements",
]
