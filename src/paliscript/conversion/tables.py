"""Character tables between Devanagari and the table-driven scripts."""

from typing import Dict, Iterable, Optional

from .codec import CharacterTable
from .devanagari import (
    ABBREVIATION_SIGN, ANUSVARA, DIGITS, PALI_CONSONANTS, PALI_MATRAS, PALI_VOWELS, VIRAMA,
    ZWJ, ZWNJ,
)
from .scripts import Script


def _zip(deva: str, native: Iterable[str]) -> Dict[str, str]:
    native = list(native)
    if len(deva) != len(native):
        raise ValueError(f"Table length mismatch: {len(deva)} != {len(native)}")
    return dict(zip(deva, native))


def _chars(*code_points: int) -> list:
    return [chr(c) for c in code_points]


def _digits(zero: int) -> Dict[str, str]:
    return _zip(DIGITS, _chars(*range(zero, zero + 10)))


def _ignore_joiners(mapping: Dict[str, str]) -> Dict[str, str]:
    mapping[ZWNJ] = ''
    mapping[ZWJ] = ''
    return mapping


def offset_table(script: Script, offset: int,
                 overrides: Optional[Dict[str, str]] = None,
                 aliases: Optional[Dict[str, str]] = None) -> CharacterTable:
    """Table for a Brahmic block laid out like Devanagari, ``offset`` away."""
    mapping = {}
    for char in ANUSVARA + PALI_VOWELS + PALI_CONSONANTS + PALI_MATRAS + VIRAMA + DIGITS:
        mapping[char] = chr(ord(char) + offset)
    mapping.update(overrides or {})
    return CharacterTable(script, _ignore_joiners(mapping), aliases)


def bengali_table() -> CharacterTable:
    return offset_table(
        Script.BENGALI, 0x80,
        overrides={
            'ळ': 'ল়',  # la + nukta
            'व': 'ৰ',    # ra with middle diagonal, kept apart from ba
        },
        aliases={
            '\u09c7\u09be': 'ो',  # o written as e + aa
            'ৎ': 'त्',        # khanda ta
        },
    )


def gujarati_table() -> CharacterTable:
    return offset_table(Script.GUJARATI, 0x200)


def gurmukhi_table() -> CharacterTable:
    return offset_table(Script.GURMUKHI, 0x100, aliases={'ੰ': ANUSVARA})  # tippi


def kannada_table() -> CharacterTable:
    return offset_table(Script.KANNADA, 0x380)


def telugu_table() -> CharacterTable:
    return offset_table(Script.TELUGU, 0x300)


def malayalam_table() -> CharacterTable:
    # atomic chillu letters read as consonant + virama
    chillus = {
        'ൺ': 'ण्',
        'ൻ': 'न्',
        'ർ': 'र्',
        'ൽ': 'ल्',
        'ൾ': 'ळ्',
        'ൿ': 'क्',
    }
    return offset_table(Script.MALAYALAM, 0x400, aliases=chillus)


def sinhala_table() -> CharacterTable:
    mapping = {ANUSVARA: 'ං', VIRAMA: '්'}
    mapping.update(_zip(PALI_VOWELS, _chars(
        0x0D85, 0x0D86, 0x0D89, 0x0D8A, 0x0D8B, 0x0D8C, 0x0D91, 0x0D94)))
    mapping.update(_zip(PALI_CONSONANTS, _chars(
        0x0D9A, 0x0D9B, 0x0D9C, 0x0D9D, 0x0D9E,
        0x0DA0, 0x0DA1, 0x0DA2, 0x0DA3, 0x0DA4,
        0x0DA7, 0x0DA8, 0x0DA9, 0x0DAA, 0x0DAB,
        0x0DAD, 0x0DAE, 0x0DAF, 0x0DB0, 0x0DB1,
        0x0DB4, 0x0DB5, 0x0DB6, 0x0DB7, 0x0DB8,
        0x0DBA, 0x0DBB, 0x0DBD, 0x0DC0, 0x0DC3, 0x0DC4, 0x0DC5)))
    mapping.update(_zip(PALI_MATRAS, _chars(
        0x0DCF, 0x0DD2, 0x0DD3, 0x0DD4, 0x0DD6, 0x0DD9, 0x0DDC)))
    # Sinhala text uses European digits
    mapping.update(_zip(DIGITS, '0123456789'))
    aliases = {'\u0dd9\u0dcf': 'ो'}  # o written as e + aa
    return CharacterTable(Script.SINHALA, _ignore_joiners(mapping), aliases)


def khmer_table() -> CharacterTable:
    mapping = {ANUSVARA: 'ំ', VIRAMA: '្'}
    # independent vowels: qa carries a, aa
    mapping.update(_zip(PALI_VOWELS, [
        'អ', 'អា', 'ឥ', 'ឦ',
        'ឧ', 'ឩ', 'ឯ', 'ឱ',
    ]))
    consonants = [c for c in range(0x1780, 0x17A2) if c not in (0x179D, 0x179E)]
    mapping.update(_zip(PALI_CONSONANTS, _chars(*consonants)))
    mapping.update(_zip(PALI_MATRAS, _chars(
        0x17B6, 0x17B7, 0x17B8, 0x17BB, 0x17BC, 0x17C1, 0x17C4)))
    mapping.update(_digits(0x17E0))
    return CharacterTable(Script.KHMER, _ignore_joiners(mapping),
                          output_only={ABBREVIATION_SIGN: '.'})


def myanmar_table() -> CharacterTable:
    mapping = {ANUSVARA: 'ံ', VIRAMA: '္'}
    mapping.update(_zip(PALI_VOWELS, [
        'အ', 'အာ', 'ဣ', 'ဤ',
        'ဥ', 'ဦ', 'ဧ', 'ဩ',
    ]))
    consonants = [c for c in range(0x1000, 0x1021) if c != 0x100A]
    mapping.update(_zip(PALI_CONSONANTS, _chars(*consonants)))
    mapping.update(_zip(PALI_MATRAS, [
        'ာ', 'ိ', 'ီ', 'ု', 'ူ', 'ေ', 'ော',
    ]))
    mapping.update(_digits(0x1040))
    # asat on its own reads as a virama
    return CharacterTable(Script.MYANMAR, _ignore_joiners(mapping), {'်': VIRAMA},
                          output_only={ABBREVIATION_SIGN: '.'})


def thai_table() -> CharacterTable:
    mapping = {ANUSVARA: 'ํ', VIRAMA: 'ฺ'}
    mapping.update(_zip(PALI_VOWELS, [
        'อ', 'อา', 'อิ', 'อี',
        'อุ', 'อู', 'เอ', 'โอ',
    ]))
    mapping.update(_zip(PALI_CONSONANTS, _chars(
        0x0E01, 0x0E02, 0x0E04, 0x0E06, 0x0E07,
        0x0E08, 0x0E09, 0x0E0A, 0x0E0C, 0x0E0D,
        0x0E0F, 0x0E10, 0x0E11, 0x0E12, 0x0E13,
        0x0E15, 0x0E16, 0x0E17, 0x0E18, 0x0E19,
        0x0E1B, 0x0E1C, 0x0E1E, 0x0E20, 0x0E21,
        0x0E22, 0x0E23, 0x0E25, 0x0E27, 0x0E2A, 0x0E2B, 0x0E2C)))
    mapping.update(_zip(PALI_MATRAS, _chars(
        0x0E32, 0x0E34, 0x0E35, 0x0E38, 0x0E39, 0x0E40, 0x0E42)))
    mapping.update(_digits(0x0E50))
    return CharacterTable(Script.THAI, _ignore_joiners(mapping))


TIBETAN_SUBJOINED_OFFSET = 0x50


def tibetan_table() -> CharacterTable:
    mapping = {ANUSVARA: 'ཾ', VIRAMA: '྄'}
    mapping.update(_zip(PALI_VOWELS, [
        'ཨ', 'ཨཱ', 'ཨི', 'ཨཱི',
        'ཨུ', 'ཨཱུ', 'ཨེ', 'ཨོ',
    ]))
    consonants = _chars(
        0x0F40, 0x0F41, 0x0F42, 0x0F43, 0x0F44,
        0x0F59, 0x0F5A, 0x0F5B, 0x0F5C, 0x0F49,
        0x0F4A, 0x0F4B, 0x0F4C, 0x0F4D, 0x0F4E,
        0x0F4F, 0x0F50, 0x0F51, 0x0F52, 0x0F53,
        0x0F54, 0x0F55, 0x0F56, 0x0F57, 0x0F58,
        0x0F61, 0x0F62, 0x0F63, 0x0F5D, 0x0F66, 0x0F67)
    consonants.append('ལ༹')  # la + tsa-phru for l underdot
    mapping.update(_zip(PALI_CONSONANTS, consonants))
    mapping.update(_zip(PALI_MATRAS, [
        'ཱ', 'ི', 'ཱི', 'ུ', 'ཱུ', 'ེ', 'ོ',
    ]))
    mapping.update(_digits(0x0F20))
    aliases = {
        '།': '।',  # shad
        '༎': '॥',  # nyis shad
    }
    # subjoined letters read as virama + consonant
    for deva, native in list(mapping.items()):
        if deva in PALI_CONSONANTS:
            aliases[subjoined(native)] = VIRAMA + deva
    return CharacterTable(Script.TIBETAN, _ignore_joiners(mapping), aliases)


def subjoined(letter: str) -> str:
    """Subjoined form of a Tibetan head letter (keeps a trailing tsa-phru)."""
    return chr(ord(letter[0]) + TIBETAN_SUBJOINED_OFFSET) + letter[1:]
