"""
Text preprocessing for free-text element fields.

Display text goes through two stages before it is embedded in a card:

1. Mention rewrite: ``@<Jane Doe>`` becomes ``<at>Jane Doe</at>``, the tag
   Teams renders as a mention.
2. Emoji normalization: shortcodes such as ``:thumbsup:`` become Unicode.

Only ``TextBlock.text`` and ``TextRun.text`` are preprocessed. URLs, ids and
other structural fields are embedded as given.
"""

import logging
import re
from typing import Any, Optional, Pattern

import emoji
from typing_extensions import Protocol, runtime_checkable

from config.settings import settings

logger = logging.getLogger(__name__)

# "@" + one or more "<" + captured run without ">" or "[" + one or more ">".
# Repeated closing ">" are swallowed into the same match.
MENTION_PATTERN: Pattern[str] = re.compile(r"@<+([^>\[]+)>+")

MENTION_REPLACEMENT = r"<at>\1</at>"


class MentionRewriter:
    """Rewrites ``@<name>`` markers into ``<at>name</at>`` tags.

    Matching is global and unanchored. A marker followed by extra ``>``
    characters consumes all of them, so ``@<a>>`` and ``@<a>`` both become
    ``<at>a</at>``, while ``@<a>b>`` becomes ``<at>a</at>b>``.
    """

    def __init__(self, pattern: Pattern[str] = MENTION_PATTERN):
        self.pattern = pattern

    def rewrite(self, text: str) -> str:
        rewritten, count = self.pattern.subn(MENTION_REPLACEMENT, text)
        if count:
            logger.debug(f"Rewrote {count} mention marker(s)")
        return rewritten


@runtime_checkable
class EmojiConverter(Protocol):
    """Pure ``str -> str`` conversion of emoji shortcodes to Unicode."""

    def to_unicode_version(self, text: str) -> str: ...


class AliasEmojiConverter:
    """Default converter backed by the ``emoji`` package.

    Unknown shortcodes are left untouched, and text that is already Unicode
    passes through unchanged.
    """

    def __init__(self, language: Optional[str] = None):
        self.language = language or settings.emoji_language

    def to_unicode_version(self, text: str) -> str:
        return emoji.emojize(text, language=self.language)


class TextPreprocessor:
    """Mention rewrite followed by emoji normalization.

    Usage:
        preprocessor = TextPreprocessor()
        preprocessor.preprocess("@<Jane Doe> :tada:")
        # '<at>Jane Doe</at> 🎉'
    """

    def __init__(
        self,
        converter: Optional[EmojiConverter] = None,
        mention_rewriter: Optional[MentionRewriter] = None,
    ):
        self.converter = converter if converter is not None else AliasEmojiConverter()
        self.mention_rewriter = mention_rewriter or MentionRewriter()

    def preprocess(self, text: Any) -> Any:
        """Return display-ready text; anything but a non-empty ``str`` is returned as-is."""
        if not text or not isinstance(text, str):
            return text
        rewritten = self.mention_rewriter.rewrite(text)
        return self.converter.to_unicode_version(rewritten)


_preprocessor: Optional[TextPreprocessor] = None


def get_text_preprocessor() -> TextPreprocessor:
    """Get the global TextPreprocessor instance."""
    global _preprocessor
    if _preprocessor is None:
        _preprocessor = TextPreprocessor()
    return _preprocessor


def reset_text_preprocessor():
    """Reset the global preprocessor (picks up changed settings)."""
    global _preprocessor
    _preprocessor = None


def preprocess(text: Any) -> Any:
    """Run ``text`` through the global preprocessor."""
    return get_text_preprocessor().preprocess(text)


__all__ = [
    "MENTION_PATTERN",
    "MentionRewriter",
    "EmojiConverter",
    "AliasEmojiConverter",
    "TextPreprocessor",
    "get_text_preprocessor",
    "reset_text_preprocessor",
    "preprocess",
]
