"""Tests for the builder validation boundary (cards/elements/validation.py)."""

import logging

import pytest

from cards.elements import (
    ElementError,
    InvalidEnumValue,
    InvalidShape,
    TextBlockParams,
    image,
    media,
    media_source,
    rich_text_block,
    text_block,
    text_run,
    validate_params,
)


class TestInvalidEnumValue:
    def test_out_of_set_color(self):
        with pytest.raises(InvalidEnumValue) as exc_info:
            text_block(text="x", color="purple")
        error = exc_info.value
        assert error.element == "TextBlock"
        assert error.field == "color"
        assert error.value == "purple"
        assert error.allowed == ("default", "dark", "light", "accent", "good", "warning", "attention")

    def test_semantic_key_gets_hint(self):
        with pytest.raises(InvalidEnumValue) as exc_info:
            text_block(text="x", color="black")
        assert "TextColor.black" in str(exc_info.value)
        assert "'dark'" in str(exc_info.value)

    def test_alignment_reported_by_schema_name(self):
        with pytest.raises(InvalidEnumValue) as exc_info:
            text_block(text="x", horizontal_alignment="middle")
        assert exc_info.value.field == "horizontalAlignment"
        assert exc_info.value.allowed == ("left", "center", "right")

    def test_image_style(self):
        with pytest.raises(InvalidEnumValue) as exc_info:
            image(url="https://x/y.png", style="rounded")
        assert exc_info.value.allowed == ("default", "person")

    def test_text_run_size(self):
        with pytest.raises(InvalidEnumValue):
            text_run(text="x", size="huge")

    def test_media_spacing(self):
        with pytest.raises(InvalidEnumValue):
            media(sources=[{"mimeType": "video/mp4", "url": "https://x"}], spacing="wide")

    def test_is_element_error(self):
        with pytest.raises(ElementError):
            text_block(text="x", weight="heavy")


class TestInvalidShape:
    def test_image_without_url(self):
        with pytest.raises(InvalidShape) as exc_info:
            image()
        assert exc_info.value.element == "Image"
        assert exc_info.value.field == "url"
        assert "required" in str(exc_info.value)

    def test_media_without_sources(self):
        with pytest.raises(InvalidShape) as exc_info:
            media()
        assert exc_info.value.field == "sources"

    def test_media_with_empty_sources(self):
        with pytest.raises(InvalidShape):
            media(sources=[])

    def test_media_sources_wrong_kind(self):
        with pytest.raises(InvalidShape):
            media(sources="https://x/y.mp4")

    def test_text_block_without_text(self):
        with pytest.raises(InvalidShape) as exc_info:
            text_block()
        assert exc_info.value.field == "text"

    def test_text_must_be_string(self):
        with pytest.raises(InvalidShape):
            text_block(text=42)

    def test_media_source_requires_both_fields(self):
        with pytest.raises(InvalidShape) as exc_info:
            media_source(url="https://x/y.mp4")
        assert exc_info.value.field == "mimeType"

    def test_rich_text_block_requires_inlines(self):
        with pytest.raises(InvalidShape):
            rich_text_block()

    def test_unknown_field(self):
        with pytest.raises(InvalidShape) as exc_info:
            text_block(text="x", colour="dark")
        assert exc_info.value.field == "colour"
        assert "no field" in str(exc_info.value)

    def test_str_includes_element_and_field(self):
        with pytest.raises(InvalidShape) as exc_info:
            image()
        assert "Element: Image" in str(exc_info.value)
        assert "Field: url" in str(exc_info.value)


class TestBoundaryBehavior:
    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="cards.elements.validation"):
            with pytest.raises(InvalidEnumValue):
                text_block(text="x", color="purple")
        assert "Rejected TextBlock input" in caplog.text
        assert "purple" in caplog.text

    def test_converter_not_reached_on_failure(self, preprocessor, converter):
        with pytest.raises(InvalidEnumValue):
            text_block(text="@<Jane>", color="purple", preprocessor=preprocessor)
        assert converter.calls == []

    def test_validate_params_returns_model(self):
        params = validate_params(TextBlockParams, "TextBlock", {"text": "x", "isSubtle": True})
        assert isinstance(params, TextBlockParams)
        assert params.is_subtle is True

    def test_pydantic_error_chained(self):
        with pytest.raises(InvalidShape) as exc_info:
            image()
        assert exc_info.value.__cause__ is not None
