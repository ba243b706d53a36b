"""Intermediate phonetic encoding (IPE).

IPE spells every Pali phoneme with one reserved code point between U+00C0
and U+00E9, in alphabetical order, so that ordinal string comparison sorts
words in Pali order and every phoneme is unambiguous. U+00D7 is skipped.
"""

from typing import Dict, Iterable, List

from .devanagari import (
    ANUSVARA, PALI_CONSONANTS, PALI_MATRAS, PALI_VOWELS, VIRAMA, ZWJ, ZWNJ,
    insert_inherent_vowel,
)
from .latin import (
    LATIN_CONSONANTS, LATIN_VOWELS, NIGGAHITA, Latin2Deva, normalize_latin,
    tokenize,
)

IPE_NIGGAHITA = chr(0xC0)
IPE_VOWELS = [chr(c) for c in range(0xC1, 0xC9)]
IPE_CONSONANTS = [chr(c) for c in range(0xC9, 0xEA) if c != 0xD7]
IPE_A = IPE_VOWELS[0]


def _deva_to_ipe_map() -> Dict[str, str]:
    mapping = {ANUSVARA: IPE_NIGGAHITA, VIRAMA: '', ZWJ: '', ZWNJ: ''}
    mapping.update(zip(PALI_VOWELS, IPE_VOWELS))
    mapping.update(zip(PALI_MATRAS, IPE_VOWELS[1:]))
    mapping.update(zip(PALI_CONSONANTS, IPE_CONSONANTS))
    return mapping


DEVA_TO_IPE = _deva_to_ipe_map()

LATIN_TO_IPE: Dict[str, str] = {NIGGAHITA: IPE_NIGGAHITA}
LATIN_TO_IPE.update(zip(LATIN_VOWELS, IPE_VOWELS))
LATIN_TO_IPE.update(zip(LATIN_CONSONANTS, IPE_CONSONANTS))

IPE_TO_LATIN = {ipe: latin for latin, ipe in LATIN_TO_IPE.items()}


def deva_to_ipe(text: str) -> str:
    text = insert_inherent_vowel(text, IPE_A)
    return ''.join(DEVA_TO_IPE.get(char, char) for char in text)


def latin_to_ipe(text: str) -> str:
    return ''.join(LATIN_TO_IPE.get(token, token) for token in tokenize(normalize_latin(text)))


def ipe_to_latin(text: str) -> str:
    return ''.join(IPE_TO_LATIN.get(char, char) for char in text)


class Ipe2Deva(Latin2Deva):
    """Build Devanagari straight from IPE, one code point per letter."""

    def __init__(self):
        super().__init__(IPE_VOWELS, IPE_CONSONANTS, IPE_NIGGAHITA)

    def letters(self, text: str) -> List[str]:
        return list(text)


_ipe2deva = Ipe2Deva()


def ipe_to_deva(text: str) -> str:
    return _ipe2deva.convert(text)


def is_ipe_vowel(char: str) -> bool:
    return 0xC1 <= ord(char) <= 0xC8


def is_ipe_consonant(char: str) -> bool:
    code = ord(char)
    return 0xC9 <= code <= 0xE9 and code != 0xD7


def is_ipe_niggahita(char: str) -> bool:
    return char == IPE_NIGGAHITA


def sort_ipe(words: Iterable[str]) -> List[str]:
    """Sort IPE words in Pali alphabetical order (ordinal comparison)."""
    return sorted(words)
