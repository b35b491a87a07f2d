"""Tests for text direction classification."""

import pytest

from townsquare_core.services.text_direction import (
    RTL_LANGUAGES,
    classify,
    direction_for_language,
    is_rtl_language,
)


class TestIsRtlLanguage:
    """Test is_rtl_language function."""

    @pytest.mark.parametrize("code", ["ar", "he", "fa", "ur", "yi", "ps", "sd"])
    def test_rtl_codes(self, code):
        assert is_rtl_language(code) is True

    @pytest.mark.parametrize("code", ["en", "es", "fr", "zh", "de"])
    def test_ltr_codes(self, code):
        assert is_rtl_language(code) is False

    def test_region_subtag_ignored(self):
        """Regional variants follow their primary language."""
        assert is_rtl_language("ar-EG") is True
        assert is_rtl_language("fa_IR") is True
        assert is_rtl_language("en-US") is False

    def test_case_insensitive(self):
        assert is_rtl_language("AR") is True

    def test_empty_and_none(self):
        assert is_rtl_language("") is False
        assert is_rtl_language(None) is False

    def test_rtl_set_is_immutable(self):
        assert isinstance(RTL_LANGUAGES, frozenset)


class TestClassify:
    """Test classify function."""

    def test_latin_text_in_ltr_language(self):
        assert classify("Hello", "en") == "ltr"

    def test_hebrew_text_in_ltr_language(self):
        """Script detection wins when the declared language is LTR."""
        assert classify("שלום", "en") == "rtl"

    def test_arabic_text_without_language(self):
        assert classify("مرحبا بالعالم", None) == "rtl"

    def test_language_code_is_authoritative_for_rtl(self):
        """Latin text declared as Arabic is still RTL."""
        assert classify("Hello", "ar") == "rtl"

    def test_rtl_mark_detected(self):
        assert classify("abc\u200fdef", "en") == "rtl"

    def test_presentation_forms_detected(self):
        assert classify("\ufb50", "en") == "rtl"

    def test_empty_text(self):
        assert classify("", "en") == "ltr"
        assert classify(None, "en") == "ltr"

    def test_cjk_is_ltr(self):
        assert classify("你好世界", "zh") == "ltr"


def test_direction_for_language():
    assert direction_for_language("he") == "rtl"
    assert direction_for_language("es") == "ltr"
    assert direction_for_language(None) == "ltr"
