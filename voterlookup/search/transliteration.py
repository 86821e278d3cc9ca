"""
Malayalam to Manglish transliteration for search matching.

Maps Malayalam script to a plain ASCII approximation so that "രാജു" and
"raju" can be compared. The goal is search recall, not phonetic accuracy:
long and short vowels collapse to one spelling, aspirated/retroflex pairs
that people type the same way share a spelling, and anything the tables do
not cover is passed through untouched.

Malayalam is an abugida. A consonant carries an inherent "a" unless the
next code point is a vowel sign (which replaces it) or the virama (which
removes it). The scanner therefore looks one unit ahead after every
consonant before deciding what vowel to emit.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

VIRAMA = "\u0d4d"
ZWNJ = "\u200c"
ZWJ = "\u200d"
INHERENT_VOWEL = "a"

MALAYALAM_BLOCK = ("\u0d00", "\u0d7f")

# Independent vowels. Long forms collapse onto the short spelling.
VOWELS: Mapping[str, str] = MappingProxyType({
    "അ": "a", "ആ": "a",
    "ഇ": "i", "ഈ": "i",
    "ഉ": "u", "ഊ": "u",
    "ഋ": "ru", "ൠ": "ru",
    "ഌ": "lu", "ൡ": "lu",
    "എ": "e", "ഏ": "e",
    "ഐ": "ai",
    "ഒ": "o", "ഓ": "o",
    "ഔ": "au",
})

# Consonants without their inherent vowel.
CONSONANTS: Mapping[str, str] = MappingProxyType({
    "ക": "k", "ഖ": "kh", "ഗ": "g", "ഘ": "gh", "ങ": "ng",
    "ച": "ch", "ഛ": "chh", "ജ": "j", "ഝ": "jh", "ഞ": "nj",
    "ട": "t", "ഠ": "th", "ഡ": "d", "ഢ": "dh", "ണ": "n",
    "ത": "th", "ഥ": "th", "ദ": "d", "ധ": "dh", "ന": "n",
    "പ": "p", "ഫ": "ph", "ബ": "b", "ഭ": "bh", "മ": "m",
    "യ": "y", "ര": "r", "ല": "l", "വ": "v",
    "ശ": "sh", "ഷ": "sh", "സ": "s", "ഹ": "h",
    "ള": "l", "ഴ": "zh", "റ": "r",
    "ഺ": "t",  # TTTA
})

# Conjuncts whose component-wise rendering reads wrong (nasal clusters,
# doubled stops). Keys are full code-point sequences including the virama;
# the longest key starting at a position wins. Everything else decomposes.
CONJUNCTS: Mapping[str, str] = MappingProxyType({
    "ന്റ": "nt",
    "ന്\u200dറ": "nt",
    "ൻറ": "nt",
    "റ്റ": "tt",
    "ങ്ങ": "ng",
    "ങ്ക": "nk",
    "ഞ്ഞ": "nj",
    "ഞ്ച": "nch",
    "ച്ച": "cch",
    "ത്ത": "tth",
    "ത്ഥ": "tth",
    "ദ്ധ": "ddh",
    "മ്പ": "mb",
    "ണ്ട": "nd",
    "ന്ദ": "nd",
    "ജ്ഞ": "jn",
})

# Dependent vowel signs. Two-unit keys cover the decomposed spellings of
# the o/au signs (NFD text stores them as e-sign + length mark).
VOWEL_SIGNS: Mapping[str, str] = MappingProxyType({
    "ാ": "a",
    "ി": "i", "ീ": "i",
    "ു": "u", "ൂ": "u",
    "ൃ": "ru", "ൄ": "ru",
    "ൢ": "lu", "ൣ": "lu",
    "െ": "e", "േ": "e",
    "ൈ": "ai",
    "ൊ": "o", "ോ": "o",
    "ൌ": "au", "ൗ": "au",
    "\u0d46\u0d3e": "o", "\u0d47\u0d3e": "o", "\u0d46\u0d57": "au",
})

# Standalone units: chillus, signs, digits, joiners.
OTHERS: Mapping[str, str] = MappingProxyType({
    # chillu letters (dead consonants)
    "ൺ": "n", "ൻ": "n", "ർ": "r", "ൽ": "l", "ൾ": "l", "ൿ": "k",
    "ൔ": "m", "ൕ": "y", "ൖ": "zh",
    "ൎ": "r",   # dot reph
    "ം": "m",   # anusvara
    "ഃ": "h",   # visarga
    "ഁ": "m",   # candrabindu
    "ഽ": "",    # avagraha
    VIRAMA: "",
    ZWNJ: "",
    ZWJ: "",
    # digits
    "൦": "0", "൧": "1", "൨": "2", "൩": "3", "൪": "4",
    "൫": "5", "൬": "6", "൭": "7", "൮": "8", "൯": "9",
})

_MAX_CONJUNCT = max(len(key) for key in CONJUNCTS)
_MAX_SIGN = max(len(key) for key in VOWEL_SIGNS)


def _match_longest(text: str, i: int, table: Mapping[str, str], max_len: int) -> tuple[str, int]:
    """Return (mapping, width) of the longest table key at text[i:], or ("", 0)."""
    for width in range(min(max_len, len(text) - i), 0, -1):
        mapped = table.get(text[i:i + width])
        if mapped is not None:
            return mapped, width
    return "", 0


def _vowel_after_consonant(text: str, i: int) -> tuple[str, int]:
    """
    Decide the vowel of a consonant (or conjunct) that ended just before i.

    Returns the Latin vowel to emit and how many code points were consumed.
    """
    if i >= len(text):
        return INHERENT_VOWEL, 0

    if text[i] == VIRAMA:
        consumed = 1
        # Legacy chillu encoding: consonant + virama + ZWJ/ZWNJ
        if i + 1 < len(text) and text[i + 1] in (ZWJ, ZWNJ):
            consumed = 2
        return "", consumed

    sign, width = _match_longest(text, i, VOWEL_SIGNS, _MAX_SIGN)
    if width:
        return sign, width

    return INHERENT_VOWEL, 0


def transliterate(text: Any) -> str:
    """
    Convert Malayalam text to Manglish.

    Total and pure: None or "" gives "", non-string input is coerced with
    str(), and characters outside the tables (Latin letters, digits,
    punctuation, other scripts) are copied through in order.

    >>> transliterate("രാജു")
    'raju'
    >>> transliterate("എന്റെ വീട് 12")
    'ente vit 12'
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    if not text:
        return ""

    out: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        base, width = _match_longest(text, i, CONJUNCTS, _MAX_CONJUNCT)
        if not width:
            base = CONSONANTS.get(text[i])
            width = 1 if base is not None else 0

        if width:
            i += width
            vowel, consumed = _vowel_after_consonant(text, i)
            out.append(base)
            out.append(vowel)
            i += consumed
            continue

        ch = text[i]
        mapped = VOWELS.get(ch)
        if mapped is None:
            mapped, width = _match_longest(text, i, VOWEL_SIGNS, _MAX_SIGN)
            if width:
                # Stray sign with no consonant before it
                out.append(mapped)
                i += width
                continue
            mapped = OTHERS.get(ch, ch)
        out.append(mapped)
        i += 1

    return "".join(out)


def to_manglish(text: Any) -> str:
    """Lowercased transliteration, the form stored in shadow fields."""
    return transliterate(text).lower()


def contains_malayalam(text: Any) -> bool:
    """True if any character falls in the Malayalam block."""
    if not isinstance(text, str):
        return False
    low, high = MALAYALAM_BLOCK
    return any(low <= ch <= high for ch in text)
