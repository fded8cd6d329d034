"""
Parameter models for the element builders.

Every builder validates its keyword input into one of these models before
assembling the element. Fields are snake_case in Python and accept their
camelCase schema names too (``is_subtle`` or ``isSubtle``). Each default here
is the documented default of the matching Adaptive Card property; fields
without a default stay ``None``.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing_extensions import Any, Dict, List, Optional, Union

from cards.elements.base import Height, HorizontalAlignment, Spacing
from cards.elements.constants import (
    ImageSize,
    ImageStyle,
    TextColor,
    TextFontType,
    TextSize,
    TextStyle,
    TextWeight,
)


class ElementParams(BaseModel):
    """Shared model configuration for builder input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        use_enum_values=True,
        validate_default=True,
        frozen=True,
    )


class LayoutParams(ElementParams):
    """Fields every block-level element carries."""

    separator: bool = Field(
        False,
        description="Draw a separating line above the element",
    )
    spacing: Optional[Spacing] = Field(
        None,
        description="Gap above the element, one of Spacing",
    )
    id: Optional[str] = Field(
        None,
        description="Unique identifier, used to toggle visibility from actions",
    )
    is_visible: bool = Field(
        True,
        description="Whether the element is shown when the card renders",
    )


# =============================================================================
# TEXT
# =============================================================================


class TextBlockParams(LayoutParams):
    text: str = Field(
        ...,
        description="Text to display. Mentions (@<name>) and emoji shortcodes are converted",
    )
    color: Optional[TextColor] = Field(None, description="Text color, one of TextColor")
    font_type: Optional[TextFontType] = Field(None, description="Font type, one of TextFontType")
    horizontal_alignment: HorizontalAlignment = Field(
        HorizontalAlignment.left,
        description="Horizontal alignment in the container",
    )
    is_subtle: bool = Field(False, description="Display the text slightly toned down")
    max_lines: Optional[int] = Field(None, description="Maximum number of lines to show")
    size: Optional[TextSize] = Field(None, description="Font size, one of TextSize")
    weight: Optional[TextWeight] = Field(None, description="Font weight, one of TextWeight")
    wrap: bool = Field(True, description="Wrap the text instead of clipping it")
    style: TextStyle = Field(TextStyle.default, description="Block style, one of TextStyle")
    height: Optional[Height] = Field(None, description="Block height, one of Height")


class TextRunParams(ElementParams):
    text: str = Field(..., description="Text to display. Markdown is not supported")
    color: Optional[TextColor] = Field(None, description="Text color, one of TextColor")
    font_type: Optional[TextFontType] = Field(None, description="Font type, one of TextFontType")
    highlight: bool = Field(False, description="Display the text highlighted")
    is_subtle: bool = Field(False, description="Display the text slightly toned down")
    italic: bool = Field(False, description="Display the text in italics")
    select_action: Optional[Dict[str, Any]] = Field(
        None,
        description="Action invoked when the run is clicked",
    )
    strikethrough: bool = Field(False, description="Display the text struck through")
    underline: bool = Field(False, description="Display the text underlined")
    size: Optional[TextSize] = Field(None, description="Font size, one of TextSize")
    weight: Optional[TextWeight] = Field(None, description="Font weight, one of TextWeight")


class RichTextBlockParams(LayoutParams):
    inlines: List[Union[str, Dict[str, Any]]] = Field(
        ...,
        description="TextRun elements or plain strings, rendered in order",
    )
    horizontal_alignment: HorizontalAlignment = Field(
        HorizontalAlignment.left,
        description="Horizontal alignment in the container",
    )
    height: Optional[Height] = Field(None, description="Block height, one of Height")


# =============================================================================
# MEDIA
# =============================================================================


class ImageParams(LayoutParams):
    url: str = Field(..., description="Image URL (PNG, JPEG or GIF)")
    alt_text: str = Field("image", description="Alternate text describing the image")
    background_color: Optional[str] = Field(
        None,
        description="Background for transparent images, e.g. '#DDDDDD'",
    )
    height: Optional[Union[str, int]] = Field(
        None,
        description="'auto', 'stretch', a pixel value such as '50px' or a numeric weight",
    )
    horizontal_alignment: HorizontalAlignment = Field(
        HorizontalAlignment.left,
        description="Horizontal alignment in the container",
    )
    select_action: Optional[Dict[str, Any]] = Field(
        None,
        description="Action invoked when the image is clicked",
    )
    size: Optional[ImageSize] = Field(None, description="Image size, one of ImageSize")
    style: Optional[ImageStyle] = Field(None, description="Squared or rounded, one of ImageStyle")
    width: Optional[Union[str, int]] = Field(
        None,
        description="Pixel width such as '50px' or a numeric weight",
    )
    allow_zoom: bool = Field(
        False,
        description="Show the Teams expand icon so the image can be zoomed",
    )


class MediaSourceParams(ElementParams):
    mime_type: str = Field(..., description="MIME type of the media, e.g. 'video/mp4'")
    url: str = Field(..., description="URL of the media file")


class MediaParams(LayoutParams):
    sources: List[Dict[str, Any]] = Field(
        ...,
        min_length=1,
        description="MediaSource objects the client tries in order",
    )
    poster: Optional[str] = Field(None, description="Image URL shown before playback")
    alt_text: Optional[str] = Field(None, description="Alternate text describing the media")
    height: Optional[Height] = Field(None, description="Element height, one of Height")


__all__ = [
    "ElementParams",
    "LayoutParams",
    "TextBlockParams",
    "TextRunParams",
    "RichTextBlockParams",
    "ImageParams",
    "MediaSourceParams",
    "MediaParams",
]
