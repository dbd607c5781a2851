"""Canonical ordering of a record collection: by name, Arabic-aware.

Follows Arabic collation as browsers apply it (CLDR "ar"): Arabic script
sorts before other scripts, letters carrying a hamza or madda sort with
their base letter (أ إ آ with ا, ؤ with و, ئ with ي), and ى / ة sort
with ي / ت. Those marks only break ties between otherwise equal names.
"""

import unicodedata
from collections.abc import Iterable

from pyuca import Collator

from namebook.domain import Record

ARABIC_BLOCK = (0x0600, 0x06FF)

# Variant letter -> base letter it is alphabetized under.
_BASE_LETTERS = str.maketrans(
    {
        "آ": "ا",
        "أ": "ا",
        "إ": "ا",
        "ٱ": "ا",
        "ٲ": "ا",
        "ٳ": "ا",
        "ٵ": "ا",
        "ؤ": "و",
        "ٶ": "و",
        "ئ": "ي",
        "ٸ": "ي",
        "ى": "ي",
        "ة": "ت",
    }
)

_collator = Collator()


def _is_arabic(ch: str) -> bool:
    return ARABIC_BLOCK[0] <= ord(ch) <= ARABIC_BLOCK[1]


def base_letters(name: str) -> str:
    """Fold hamza/madda carriers and ى/ة onto the letter they sort under."""
    return unicodedata.normalize("NFC", name).translate(_BASE_LETTERS)


def name_sort_key(name: str) -> tuple[int, tuple[int, ...], tuple[int, ...]]:
    """Arabic-script names first; then UCA order of the folded name; then of the name as written."""
    stripped = unicodedata.normalize("NFC", name.strip())
    group = 0 if stripped and _is_arabic(stripped[0]) else 1
    return group, _collator.sort_key(base_letters(stripped)), _collator.sort_key(stripped)


def sort_records(records: Iterable[Record]) -> list[Record]:
    """Return a new list in canonical order. Stable for equal names."""
    return sorted(records, key=lambda r: name_sort_key(r.name))
