from enum import Enum
from typing import Dict, List

from .codec import ScriptCodec
from .devanagari import (
    ANUSVARA, DIGITS, PALI_CONSONANTS, PALI_MATRAS, PALI_VOWELS, VIRAMA,
    ZWJ, ZWNJ, insert_inherent_vowel,
)
from .scripts import Script

CYRILLIC_A = 'а'

CONSONANTS = [
    'г', 'к', 'г̇', 'гх', 'н̇',
    'ж', 'ч', 'ж̇', 'жх', 'н̃',
    'д', 'т', 'д̣', 'дх', 'н̣',
    'д̇', 'т̇', 'д̣̇', 'д̇х', 'н',
    'б', 'п', 'б̣', 'бх', 'м',
    'я', 'р', 'л', 'в', 'с', 'х', 'л̣',
]

VOWELS = ['а', 'аа', 'и', 'ий', 'у', 'уу', 'з', 'о']

NIGGAHITA = 'м̣'

# spellings accepted on input only
INPUT_ALIASES = {
    'д̣̇': 'द',  # combining marks in canonical order
    'е': 'ए',  # ie written for e
}


class LetterType(Enum):
    NONE = 0
    CONSONANT = 1
    VOWEL = 2
    NIGGAHITA = 3


class CyrillicCodec(ScriptCodec):
    """Cyrillic Pali spelling with a written a and no virama.

    Every vowel is written out, so decoding has to decide from context
    whether a vowel letter is a vowel sign or an independent vowel and where
    a virama belongs between consonants.
    """

    script = Script.CYRILLIC

    def __init__(self):
        self.encode_map: Dict[str, str] = {ANUSVARA: NIGGAHITA, VIRAMA: '', ZWJ: '', ZWNJ: ''}
        self.encode_map.update(zip(PALI_CONSONANTS, CONSONANTS))
        self.encode_map.update(zip(PALI_VOWELS, VOWELS))
        self.encode_map.update(zip(PALI_MATRAS, VOWELS[1:]))
        self.encode_map.update(zip(DIGITS, '0123456789'))
        self.encode_map['॰'] = '.'

        self.consonants = dict(zip(CONSONANTS, PALI_CONSONANTS))
        self.vowels = dict(zip(VOWELS, PALI_VOWELS))
        self.matras = dict(zip(VOWELS, [''] + list(PALI_MATRAS)))
        for spelling, deva in INPUT_ALIASES.items():
            if deva in PALI_CONSONANTS:
                self.consonants[spelling] = deva
            else:
                self.vowels[spelling] = deva
                self.matras[spelling] = PALI_MATRAS[PALI_VOWELS.index(deva) - 1]
        self.max_length = max(len(k) for k in list(self.consonants) + list(self.vowels))

    def from_devanagari(self, text: str) -> str:
        text = insert_inherent_vowel(text, CYRILLIC_A)
        return ''.join(self.encode_map.get(char, char) for char in text)

    def _match(self, text: str, pos: int):
        for length in range(min(self.max_length, len(text) - pos), 0, -1):
            chunk = text[pos:pos + length]
            if chunk == NIGGAHITA:
                return LetterType.NIGGAHITA, chunk
            if chunk in self.consonants:
                return LetterType.CONSONANT, chunk
            if chunk in self.vowels:
                return LetterType.VOWEL, chunk
        return None, text[pos]

    def to_devanagari(self, text: str) -> str:
        out: List[str] = []
        last = LetterType.NONE
        i = 0
        while i < len(text):
            kind, chunk = self._match(text, i)
            i += len(chunk)
            if kind is LetterType.CONSONANT:
                if last is LetterType.CONSONANT:
                    out.append(VIRAMA)
                out.append(self.consonants[chunk])
                last = LetterType.CONSONANT
            elif kind is LetterType.VOWEL:
                if last is LetterType.CONSONANT:
                    out.append(self.matras[chunk])
                else:
                    out.append(self.vowels[chunk])
                last = LetterType.VOWEL
            elif kind is LetterType.NIGGAHITA:
                # niggahita never joins a cluster and keeps the vowel context
                out.append(ANUSVARA)
                if last is LetterType.CONSONANT:
                    last = LetterType.VOWEL
            else:
                if last is LetterType.CONSONANT:
                    out.append(VIRAMA)
                out.append(chunk)
                last = LetterType.NONE
        if last is LetterType.CONSONANT:
            out.append(VIRAMA)
        return ''.join(out)
