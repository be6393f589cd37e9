"""
Slug normalisation for translated identifier fields
"""

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str, separator: str = "-") -> str:
    """
    Turn free text into a URL-safe slug.

    Diacritics are stripped, the result is lowercased, and every run of
    characters outside [a-z0-9] collapses into a single separator.

    Example:
        slugify("Ma Belle Page!")   # "ma-belle-page"
        slugify("Élan  Vital")      # "elan-vital"
    """
    normalized = unicodedata.normalize("NFKD", text)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM.sub(separator, ascii_text.lower()).strip(separator)
