"""
Card Elements Package - Adaptive Card element builders.

This package provides:
- Element builders: text_block, text_run, rich_text_block, image, media, media_source
- People icons: user_icon, user_icon_set
- Enum registries: TextColor, TextSize, ImageStyle, ... and the layout enums
- Text preprocessing: mention rewriting and emoji shortcode normalization
- Validation: InvalidEnumValue / InvalidShape raised at the builder boundary

Usage:
    from cards.elements import TextColor, text_block, clean_element

    block = text_block(text="Hi @<Jane Doe> :wave:", color=TextColor.blue)
    payload = clean_element(block)
"""

# =============================================================================
# ENUMS
# =============================================================================
from cards.elements.base import CardBase, HAlign, Height, HorizontalAlignment, Spacing
from cards.elements.constants import (
    ENUM_REGISTRY,
    IMAGE_SIZES,
    IMAGE_STYLES,
    TEXT_COLORS,
    TEXT_FONT_TYPES,
    TEXT_SIZES,
    TEXT_STYLES,
    TEXT_WEIGHTS,
    ImageSize,
    ImageStyle,
    TextColor,
    TextFontType,
    TextSize,
    TextStyle,
    TextWeight,
    enum_values,
    to_external,
)

# =============================================================================
# ERRORS AND VALIDATION
# =============================================================================
from cards.elements.exceptions import ElementError, InvalidEnumValue, InvalidShape
from cards.elements.validation import clean_element, validate_params

# =============================================================================
# TEXT PREPROCESSING
# =============================================================================
from cards.elements.text import (
    AliasEmojiConverter,
    EmojiConverter,
    MentionRewriter,
    TextPreprocessor,
    get_text_preprocessor,
    preprocess,
    reset_text_preprocessor,
)

# =============================================================================
# BUILDERS
# =============================================================================
from cards.elements.params import (
    ImageParams,
    MediaParams,
    MediaSourceParams,
    RichTextBlockParams,
    TextBlockParams,
    TextRunParams,
)
from cards.elements.builders import (
    build_image,
    build_media,
    build_media_source,
    build_rich_text_block,
    build_text_block,
    build_text_run,
    image,
    media,
    media_source,
    rich_text_block,
    text_block,
    text_run,
)
from cards.elements.people import user_icon, user_icon_set
from cards.elements.card_elements import Elements, get_elements, reset_elements

__all__ = [
    # Enums
    "CardBase",
    "HAlign",
    "HorizontalAlignment",
    "Spacing",
    "Height",
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
    # Errors
    "ElementError",
    "InvalidEnumValue",
    "InvalidShape",
    "validate_params",
    "clean_element",
    # Text
    "EmojiConverter",
    "AliasEmojiConverter",
    "MentionRewriter",
    "TextPreprocessor",
    "get_text_preprocessor",
    "reset_text_preprocessor",
    "preprocess",
    # Params
    "TextBlockParams",
    "TextRunParams",
    "RichTextBlockParams",
    "ImageParams",
    "MediaParams",
    "MediaSourceParams",
    # Builders
    "build_text_block",
    "build_text_run",
    "build_rich_text_block",
    "build_image",
    "build_media",
    "build_media_source",
    "text_block",
    "text_run",
    "rich_text_block",
    "image",
    "media",
    "media_source",
    "user_icon",
    "user_icon_set",
    "Elements",
    "get_elements",
    "reset_elements",
]
