"""
Adaptive Card element builders.

Each element has two entry points:

- ``text_block(**fields)`` and friends validate keyword input (snake_case or
  camelCase) and return the element dict.
- ``build_text_block(params)`` and friends are the pure model-to-dict step,
  for callers that already hold a validated parameter model.

Every declared key is present in the returned dict; unset optional fields
are ``None``. Use ``clean_element`` before serializing.

Usage:
    from cards.elements import TextColor, text_block

    block = text_block(text="Deployed :rocket:", color=TextColor.green, size="large")
"""

import logging
from typing import Any, Dict, Optional

from cards.card_types import (
    ImageElement,
    MediaElement,
    MediaSourceElement,
    RichTextBlockElement,
    TextBlockElement,
    TextRunElement,
)
from cards.elements.params import (
    ImageParams,
    MediaParams,
    MediaSourceParams,
    RichTextBlockParams,
    TextBlockParams,
    TextRunParams,
)
from cards.elements.text import TextPreprocessor, get_text_preprocessor
from cards.elements.validation import literal, validate_params
from config.enhanced_logging import log_execution_time

logger = logging.getLogger(__name__)


def _preprocessor(preprocessor: Optional[TextPreprocessor]) -> TextPreprocessor:
    return preprocessor if preprocessor is not None else get_text_preprocessor()


def zoom_settings(allow_zoom: bool) -> Dict[str, Any]:
    """Teams-specific ``msTeams`` block of an Image; never ``None``."""
    return {"allowExpand": True} if allow_zoom else {}


# =============================================================================
# TEXT
# =============================================================================


def build_text_block(
    params: TextBlockParams, preprocessor: Optional[TextPreprocessor] = None
) -> TextBlockElement:
    """Displays text, allowing control over font size, weight and color.

    https://adaptivecards.io/explorer/TextBlock.html
    """
    return {
        "type": "TextBlock",
        "text": _preprocessor(preprocessor).preprocess(params.text),
        "color": literal(params.color),
        "fontType": literal(params.font_type),
        "horizontalAlignment": literal(params.horizontal_alignment),
        "isSubtle": params.is_subtle,
        "maxLines": params.max_lines,
        "size": literal(params.size),
        "weight": literal(params.weight),
        "wrap": params.wrap,
        "style": literal(params.style),
        "height": literal(params.height),
        "separator": params.separator,
        "spacing": literal(params.spacing),
        "id": params.id,
        "isVisible": params.is_visible,
    }


def build_text_run(
    params: TextRunParams, preprocessor: Optional[TextPreprocessor] = None
) -> TextRunElement:
    """A single run of formatted text inside a RichTextBlock.

    https://adaptivecards.io/explorer/TextRun.html
    """
    return {
        "type": "TextRun",
        "text": _preprocessor(preprocessor).preprocess(params.text),
        "color": literal(params.color),
        "fontType": literal(params.font_type),
        "highlight": params.highlight,
        "isSubtle": params.is_subtle,
        "italic": params.italic,
        "selectAction": params.select_action,
        "strikethrough": params.strikethrough,
        "underline": params.underline,
        "size": literal(params.size),
        "weight": literal(params.weight),
    }


def build_rich_text_block(params: RichTextBlockParams) -> RichTextBlockElement:
    """An array of inlines, allowing inline text formatting.

    https://adaptivecards.io/explorer/RichTextBlock.html
    """
    return {
        "type": "RichTextBlock",
        "inlines": params.inlines,
        "horizontalAlignment": literal(params.horizontal_alignment),
        "height": literal(params.height),
        "separator": params.separator,
        "spacing": literal(params.spacing),
        "id": params.id,
        "isVisible": params.is_visible,
    }


# =============================================================================
# MEDIA
# =============================================================================


def build_image(params: ImageParams) -> ImageElement:
    """Displays an image. Acceptable formats are PNG, JPEG, and GIF.

    https://adaptivecards.io/explorer/Image.html
    """
    element: ImageElement = {
        "type": "Image",
        "url": params.url,
        "altText": params.alt_text,
        "backgroundColor": params.background_color,
        "height": literal(params.height),
        "horizontalAlignment": literal(params.horizontal_alignment),
        "selectAction": params.select_action,
        "size": literal(params.size),
        "style": literal(params.style),
        "width": literal(params.width),
        "separator": params.separator,
        "spacing": literal(params.spacing),
        "id": params.id,
        "isVisible": params.is_visible,
    }
    # Derived from allow_zoom, not from a constant default
    element["msTeams"] = zoom_settings(params.allow_zoom)
    return element


def build_media(params: MediaParams) -> MediaElement:
    """A media player for audio or video content.

    https://adaptivecards.io/explorer/Media.html
    """
    return {
        "type": "Media",
        "sources": params.sources,
        "poster": params.poster,
        "altText": params.alt_text,
        "height": literal(params.height),
        "separator": params.separator,
        "spacing": literal(params.spacing),
        "id": params.id,
        "isVisible": params.is_visible,
    }


def build_media_source(params: MediaSourceParams) -> MediaSourceElement:
    """https://adaptivecards.io/explorer/MediaSource.html"""
    return {"mimeType": params.mime_type, "url": params.url}


# =============================================================================
# KEYWORD ENTRY POINTS
# =============================================================================


@log_execution_time
def text_block(*, preprocessor: Optional[TextPreprocessor] = None, **fields: Any) -> TextBlockElement:
    """Build a TextBlock.

    Args:
        preprocessor: Text pipeline to use instead of the global one
        **fields: TextBlockParams fields. ``text`` is required; defaults are
            horizontal_alignment="left", is_subtle=False, wrap=True,
            style="default", separator=False, is_visible=True

    Raises:
        InvalidEnumValue: color, font_type, size, weight, style, height,
            spacing or horizontal_alignment outside its enum
        InvalidShape: text missing or not a string, or an unknown field
    """
    params = validate_params(TextBlockParams, "TextBlock", fields)
    return build_text_block(params, preprocessor)


@log_execution_time
def text_run(*, preprocessor: Optional[TextPreprocessor] = None, **fields: Any) -> TextRunElement:
    """Build a TextRun; highlight, is_subtle, italic, strikethrough and underline default to False."""
    params = validate_params(TextRunParams, "TextRun", fields)
    return build_text_run(params, preprocessor)


@log_execution_time
def rich_text_block(**fields: Any) -> RichTextBlockElement:
    """Build a RichTextBlock from ``inlines`` (TextRun dicts or strings)."""
    params = validate_params(RichTextBlockParams, "RichTextBlock", fields)
    return build_rich_text_block(params)


@log_execution_time
def image(**fields: Any) -> ImageElement:
    """Build an Image.

    ``url`` is required and ``alt_text`` defaults to "image". Passing
    ``allow_zoom=True`` sets ``msTeams`` to ``{"allowExpand": True}``;
    otherwise it is ``{}``.
    """
    params = validate_params(ImageParams, "Image", fields)
    return build_image(params)


@log_execution_time
def media(**fields: Any) -> MediaElement:
    """Build a Media element from a non-empty list of ``sources``."""
    params = validate_params(MediaParams, "Media", fields)
    return build_media(params)


@log_execution_time
def media_source(**fields: Any) -> MediaSourceElement:
    params = validate_params(MediaSourceParams, "MediaSource", fields)
    return build_media_source(params)


__all__ = [
    "build_text_block",
    "build_text_run",
    "build_rich_text_block",
    "build_image",
    "build_media",
    "build_media_source",
    "zoom_settings",
    "text_block",
    "text_run",
    "rich_text_block",
    "image",
    "media",
    "media_source",
]
