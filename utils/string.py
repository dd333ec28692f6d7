import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")


def clean_text(text) -> str:
    """
    NFKC-normalise text and collapse every run of whitespace
    (non-breaking spaces included) into a single space.
    """
    if text is None:
        return ""
    text = unicodedata.normalize("NFKC", str(text))
    return _WHITESPACE.sub(" ", text).strip()


def normalize_locality(text) -> str:
    """
    Comparison key for a city or state name.

    Pincode masters store localities lowercase while reference lists are
    title case, so "  new  delhi" and "New Delhi" must compare equal.
    """
    return clean_text(text).casefold()
