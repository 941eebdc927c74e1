# ABOUTME: Content layout (visual reading direction) derived from language and progression.
# ABOUTME: Recognized language tags decide first; the reading progression is the fallback.

import logging
from enum import Enum

from pubcore.webpub.metadata import ReadingProgression

logger = logging.getLogger(__name__)


class ContentLayout(str, Enum):
    """Resolved visual reading direction for rendering."""

    LTR = "ltr"
    RTL = "rtl"


# Primary language subtags, ISO 639-1 and ISO 639-2 (B and T forms).
RTL_LANGUAGES: frozenset[str] = frozenset(
    {
        "ar", "ara",  # Arabic
        "he", "iw", "heb",  # Hebrew
        "fa", "fas", "per",  # Persian
        "ur", "urd",  # Urdu
        "ps", "pus",  # Pashto
        "sd", "snd",  # Sindhi
        "yi", "ji", "yid",  # Yiddish
        "ug", "uig",  # Uyghur
        "dv", "div",  # Dhivehi
        "ckb",  # Central Kurdish
    }
)  # fmt: skip

LTR_LANGUAGES: frozenset[str] = frozenset(
    {
        "af", "afr", "am", "amh", "az", "aze", "be", "bel", "bg", "bul",
        "bn", "ben", "bs", "bos", "ca", "cat", "cs", "ces", "cze", "cy",
        "cym", "wel", "da", "dan", "de", "deu", "ger", "el", "ell", "gre",
        "en", "eng", "eo", "epo", "es", "spa", "et", "est", "eu", "eus",
        "baq", "fi", "fin", "fil", "tl", "tgl", "fr", "fra", "fre", "ga",
        "gle", "gl", "glg", "gu", "guj", "hi", "hin", "hr", "hrv", "hu",
        "hun", "hy", "hye", "arm", "id", "ind", "is", "isl", "ice", "it",
        "ita", "ja", "jpn", "ka", "kat", "geo", "kk", "kaz", "km", "khm",
        "kn", "kan", "ko", "kor", "ky", "kir", "la", "lat", "lb", "ltz",
        "lo", "lao", "lt", "lit", "lv", "lav", "mk", "mkd", "mac", "ml",
        "mal", "mn", "mon", "mr", "mar", "ms", "msa", "may", "mt", "mlt",
        "my", "mya", "bur", "nb", "nob", "ne", "nep", "nl", "nld", "dut",
        "nn", "nno", "no", "nor", "pa", "pan", "pl", "pol", "pt", "por",
        "ro", "ron", "rum", "ru", "rus", "si", "sin", "sk", "slk", "slo",
        "sl", "slv", "sq", "sqi", "alb", "sr", "srp", "sv", "swe", "sw",
        "swa", "ta", "tam", "te", "tel", "tg", "tgk", "th", "tha", "tr",
        "tur", "uk", "ukr", "uz", "uzb", "vi", "vie", "zh", "zho", "chi",
        "zu", "zul",
    }
)  # fmt: skip


def _primary_subtag(language: str) -> str:
    """Lower-cased primary subtag: 'ar-EG' -> 'ar', 'zh_Hant' -> 'zh'."""
    return language.strip().lower().replace("_", "-").split("-", 1)[0]


def layout_for_language(language: str | None) -> ContentLayout | None:
    """Return the layout implied by a language tag, or None if it isn't recognized."""
    if not language:
        return None
    subtag = _primary_subtag(language)
    if subtag in RTL_LANGUAGES:
        return ContentLayout.RTL
    if subtag in LTR_LANGUAGES:
        return ContentLayout.LTR
    return None


def resolve_content_layout(
    language: str | None, reading_progression: ReadingProgression | None
) -> ContentLayout:
    """Resolve the content layout for a language and a reading progression hint.

    A recognized language always decides. Only an absent or unrecognized
    language falls back to the progression, where RTL maps to RTL and
    anything else to LTR.
    """
    layout = layout_for_language(language)
    if layout is not None:
        return layout

    logger.debug(
        "Language %r not recognized, falling back to reading progression %s",
        language,
        reading_progression,
    )
    if reading_progression == ReadingProgression.RTL:
        return ContentLayout.RTL
    return ContentLayout.LTR
