import re
import unicodedata
from enum import Enum
from typing import Dict, List

from .devanagari import (
    ANUSVARA, DIGIT_ZERO, PALI_CONSONANTS, PALI_MATRAS, PALI_VOWELS, VIRAMA,
    ZWJ, ZWNJ, add_conjunct_joiners, insert_inherent_vowel,
)

# Latin letters in Devanagari order
LATIN_VOWELS = ['a', 'ā', 'i', 'ī', 'u', 'ū', 'e', 'o']
LATIN_CONSONANTS = [
    'k', 'kh', 'g', 'gh', 'ṅ',
    'c', 'ch', 'j', 'jh', 'ñ',
    'ṭ', 'ṭh', 'ḍ', 'ḍh', 'ṇ',
    't', 'th', 'd', 'dh', 'n',
    'p', 'ph', 'b', 'bh', 'm',
    'y', 'r', 'l', 'v', 's', 'h', 'ḷ',
]
NIGGAHITA = 'ṃ'

# letters that form a single aspirated consonant with a following h
ASPIRABLE = set('kgcjṭḍtdpb')

# every lowercase letter of the Pali alphabet, as single code points
PALI_LETTERS = set(''.join(LATIN_VOWELS + LATIN_CONSONANTS) + NIGGAHITA)


def _deva_to_latin_map() -> Dict[str, str]:
    mapping = {ANUSVARA: NIGGAHITA, VIRAMA: '', ZWJ: '', ZWNJ: ''}
    mapping.update(zip(PALI_VOWELS, LATIN_VOWELS))
    mapping.update(zip(PALI_MATRAS, LATIN_VOWELS[1:]))
    mapping.update(zip(PALI_CONSONANTS, LATIN_CONSONANTS))
    # Sanskrit diphthongs, seen in non-Pali words
    mapping.update({'ऐ': 'ai', 'औ': 'au', 'ै': 'ai', 'ौ': 'au'})
    for i in range(10):
        mapping[chr(DIGIT_ZERO + i)] = str(i)
    mapping['॰'] = '.'
    return mapping


DEVA_TO_LATIN = _deva_to_latin_map()


_WORD = re.compile(r'[^\W\d_]+')


def _fold_pali_word(match) -> str:
    word = match.group()
    lower = word.lower()
    return lower if set(lower) <= PALI_LETTERS else word


def normalize_latin(text: str) -> str:
    """NFC-normalize Latin input so diacritics are single code points.

    Words spelled wholly in Pali letters are lowercased. Any other word keeps
    its case, so foreign text passes through as written.
    """
    return _WORD.sub(_fold_pali_word, unicodedata.normalize('NFC', text))


def tokenize(text: str) -> List[str]:
    """Split Latin text into Pali letters, joining aspirate digraphs.

    Characters outside the Pali alphabet come through as single tokens.
    """
    tokens = []
    i = 0
    while i < len(text):
        char = text[i]
        if char in ASPIRABLE and i + 1 < len(text) and text[i + 1] == 'h':
            tokens.append(char + 'h')
            i += 2
        else:
            tokens.append(char)
            i += 1
    return tokens


def deva_to_latin(text: str) -> str:
    """Devanagari to Latin (Pali IAST). Dandas pass through."""
    text = insert_inherent_vowel(text, 'a')
    return ''.join(DEVA_TO_LATIN.get(char, char) for char in text)


class LetterType(Enum):
    NONE = 0
    VOWEL = 1
    CONSONANT = 2


class Latin2Deva:
    """Build Devanagari from Latin letter by letter.

    The previous letter type decides whether a vowel is written as a vowel
    sign or an independent letter, and whether a virama separates two
    consonants. A word ending in a consonant gets a final virama.
    """

    def __init__(self, vowels: List[str] = LATIN_VOWELS,
                 consonants: List[str] = LATIN_CONSONANTS, niggahita: str = NIGGAHITA):
        self.vowels = dict(zip(vowels, PALI_VOWELS))
        self.matras = dict(zip(vowels, [''] + list(PALI_MATRAS)))
        self.consonants = dict(zip(consonants, PALI_CONSONANTS))
        self.niggahita = niggahita

    def letters(self, text: str) -> List[str]:
        return tokenize(normalize_latin(text))

    def convert(self, text: str) -> str:
        out: List[str] = []
        last = LetterType.NONE
        for token in self.letters(text):
            if token in self.consonants:
                if last is LetterType.CONSONANT:
                    out.append(VIRAMA)
                out.append(self.consonants[token])
                last = LetterType.CONSONANT
            elif token in self.vowels:
                if last is LetterType.CONSONANT:
                    out.append(self.matras[token])
                else:
                    out.append(self.vowels[token])
                last = LetterType.VOWEL
            elif token == self.niggahita:
                # the nasal does not change the vowel context
                out.append(ANUSVARA)
            else:
                if last is LetterType.CONSONANT:
                    out.append(VIRAMA)
                if token.isdigit() and token.isascii():
                    token = chr(DIGIT_ZERO + int(token))
                out.append(token)
                last = LetterType.NONE
        if last is LetterType.CONSONANT:
            out.append(VIRAMA)
        return add_conjunct_joiners(''.join(out))


_latin2deva = Latin2Deva()


def latin_to_deva(text: str) -> str:
    return _latin2deva.convert(text)


def to_title_case(text: str) -> str:
    """Capitalize the first letter of every word.

    Combining marks belong to the letter before them, so a letter after a
    combining mark is not treated as a word start.
    """
    out = []
    in_word = False
    for char in text:
        if char.isalpha():
            if not in_word:
                char = char.upper()
            in_word = True
        elif unicodedata.category(char).startswith('M'):
            pass
        else:
            in_word = False
        out.append(char)
    return ''.join(out)
