from typing import List

from .codec import ScriptCodec
from .devanagari import VIRAMA, ZWJ, ZWNJ, is_consonant
from .scripts import Script
from .tables import thai_table

SARA_E = 'เ'
SARA_O = 'โ'
SARA_I = 'ิ'
NIKHAHIT = 'ํ'
SARA_UE = 'ึ'  # written for i + niggahita

PRE_BASE_VOWELS = (SARA_E, SARA_O)
DEVA_PRE_BASE_MATRAS = ('े', 'ो')


class ThaiCodec(ScriptCodec):
    """Thai Pali orthography.

    The e and o signs are written before their consonant. Encoding moves them
    in front of the last consonant of the cluster they belong to; decoding
    reads them with one character of lookahead.
    """

    script = Script.THAI

    def __init__(self):
        self.table = thai_table()
        self.consonants = {
            native: deva for native, deva in self.table.single.items()
            if is_consonant(deva)
        }

    def from_devanagari(self, text: str) -> str:
        mapping = self.table.from_devanagari
        out: List[str] = []
        last_consonant = -1
        for char in text:
            if char in DEVA_PRE_BASE_MATRAS and last_consonant >= 0:
                out.insert(last_consonant, mapping[char])
                last_consonant = -1
                continue
            if is_consonant(char) and char in mapping:
                last_consonant = len(out)
            elif char not in (VIRAMA, ZWNJ, ZWJ):
                last_consonant = -1
            out.append(mapping.get(char, char))
        return ''.join(out).replace(SARA_I + NIKHAHIT, SARA_UE)

    def to_devanagari(self, text: str) -> str:
        text = text.replace(SARA_UE, SARA_I + NIKHAHIT)
        out: List[str] = []
        i = 0
        while i < len(text):
            char = text[i]
            following = text[i + 1] if i + 1 < len(text) else ''
            if char in PRE_BASE_VOWELS and following in self.consonants:
                # sign before a consonant: consonant, then the vowel
                out.append(self.consonants[following])
                out.append(self.table.single[char])
                i += 2
                continue
            found = self.table.match(text, i)
            if found is None:
                out.append(char)
                i += 1
            else:
                out.append(found[0])
                i += found[1]
        return ''.join(out)
