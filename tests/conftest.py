"""Shared fixtures for the card element tests."""

import pytest

from cards.elements import Elements, TextPreprocessor, reset_elements, reset_text_preprocessor
from config.settings import settings


class RecordingConverter:
    """Emoji converter stand-in that records its input and knows two shortcodes."""

    SHORTCODES = {":wave:": "👋", ":tada:": "🎉"}

    def __init__(self):
        self.calls = []

    def to_unicode_version(self, text):
        self.calls.append(text)
        for code, char in self.SHORTCODES.items():
            text = text.replace(code, char)
        return text


@pytest.fixture
def converter():
    return RecordingConverter()


@pytest.fixture
def preprocessor(converter):
    return TextPreprocessor(converter=converter)


@pytest.fixture
def elements(converter):
    return Elements(emoji_converter=converter)


@pytest.fixture
def lenient(monkeypatch):
    """Turn off builder validation for the duration of a test."""
    monkeypatch.setattr(settings, "strict_validation", False)


@pytest.fixture(autouse=True)
def _fresh_singletons():
    yield
    reset_elements()
    reset_text_preprocessor()
