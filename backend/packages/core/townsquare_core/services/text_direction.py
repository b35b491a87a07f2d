"""
Text direction classification.

Decides whether text is rendered left-to-right or right-to-left, first by
language code and then by scanning for right-to-left script characters.
"""

import re

from townsquare_core.schemas.translation import TextDirection

RTL_LANGUAGES: frozenset[str] = frozenset({
    "ar",  # Arabic
    "he",  # Hebrew
    "fa",  # Persian
    "ur",  # Urdu
    "yi",  # Yiddish
    "ps",  # Pashto
    "sd",  # Sindhi
})

# Hebrew through Thaana, RLM / RLE / RLO controls, Hebrew and Arabic
# presentation forms.
_RTL_CHARS_RE = re.compile(
    r"[\u0591-\u07FF\u200F\u202B\u202E\uFB1D-\uFDFD\uFE70-\uFEFC]"
)


def primary_subtag(language_code: str) -> str:
    """Reduce a language tag such as "zh-CN" or "pt_BR" to "zh" or "pt"."""
    return language_code.strip().lower().replace("_", "-").split("-", 1)[0]


def is_rtl_language(language_code: str | None) -> bool:
    """
    Check whether a language code names a right-to-left language.

    Region subtags are ignored, so "ar-EG" counts as Arabic.
    """
    if not language_code:
        return False
    return primary_subtag(language_code) in RTL_LANGUAGES


def direction_for_language(language_code: str | None) -> TextDirection:
    """Canonical direction of a language, ignoring any text."""
    return "rtl" if is_rtl_language(language_code) else "ltr"


def classify(text: str | None, language_code: str | None) -> TextDirection:
    """
    Classify the direction of ``text`` written in ``language_code``.

    The language code is authoritative when it names an RTL language,
    even for Latin-script text. Otherwise any Hebrew/Arabic-range character
    or RTL control character makes the text RTL.

    Args:
        text: Text to inspect. Empty or None is treated as LTR.
        language_code: Language the text is declared to be in.

    Returns:
        "rtl" or "ltr".
    """
    if is_rtl_language(language_code):
        return "rtl"
    if text and _RTL_CHARS_RE.search(text):
        return "rtl"
    return "ltr"
