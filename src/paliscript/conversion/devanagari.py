import re
from typing import Iterable

# Devanagari code points shared by every codec
ANUSVARA = 'ं'
CANDRABINDU = 'ँ'
VIRAMA = '्'
DANDA = '।'
DOUBLE_DANDA = '॥'
ABBREVIATION_SIGN = '॰'
ZWNJ = '\u200c'
ZWJ = '\u200d'

CONSONANT_RANGE = (0x0915, 0x0939)
INDEPENDENT_VOWEL_RANGE = (0x0905, 0x0914)
DEPENDENT_VOWEL_RANGE = (0x093E, 0x094C)
DIGIT_ZERO = 0x0966

# The Pali inventory in Devanagari, used to build every offset table
PALI_VOWELS = 'अआइईउऊएओ'
PALI_MATRAS = 'ािीुूेो'
PALI_CONSONANTS = (
    'कखगघङ'
    'चछजझञ'
    'टठडढण'
    'तथदधन'
    'पफबभम'
    'यरलवसहळ'
)
DIGITS = ''.join(chr(DIGIT_ZERO + i) for i in range(10))

# Conjuncts written with a visible virama (ZWJ after the virama)
JOINED_CONJUNCTS = [
    ('क', 'क'),  # k + k
    ('क', 'ल'),  # k + l
    ('क', 'व'),  # k + v
    ('च', 'च'),  # c + c
    ('ज', 'ज'),  # j + j
    ('ञ', 'च'),  # ñ + c
    ('ञ', 'ज'),  # ñ + j
    ('ञ', 'ञ'),  # ñ + ñ
    ('न', 'न'),  # n + n
    ('प', 'ल'),  # p + l
    ('ल', 'ल'),  # l + l
]

_JOINED_PATTERN = re.compile(
    '|'.join(first + VIRAMA + second for first, second in JOINED_CONJUNCTS)
)


def is_consonant(char: str) -> bool:
    return CONSONANT_RANGE[0] <= ord(char) <= CONSONANT_RANGE[1]


def is_independent_vowel(char: str) -> bool:
    return INDEPENDENT_VOWEL_RANGE[0] <= ord(char) <= INDEPENDENT_VOWEL_RANGE[1]


def is_dependent_vowel(char: str) -> bool:
    return DEPENDENT_VOWEL_RANGE[0] <= ord(char) <= DEPENDENT_VOWEL_RANGE[1]


def is_nasal(char: str) -> bool:
    return char in (ANUSVARA, CANDRABINDU)


def _blocks_inherent_vowel(char: str) -> bool:
    # dependent vowel signs and virama (U+093E..U+094D)
    return 0x093E <= ord(char) <= 0x094D


def insert_inherent_vowel(text: str, vowel: str, blockers: Iterable[str] = ()) -> str:
    """Write out the inherent vowel after every bare consonant.

    A consonant keeps its inherent vowel unless the next character is a
    dependent vowel sign, a virama or one of ``blockers``. A consonant at the
    end of the text is bare too.
    """
    blocking = set(blockers)
    blocking.add(vowel)
    out = []
    last = len(text) - 1
    for i, char in enumerate(text):
        out.append(char)
        if not is_consonant(char):
            continue
        if i == last:
            out.append(vowel)
            continue
        following = text[i + 1]
        if not _blocks_inherent_vowel(following) and following not in blocking:
            out.append(vowel)
    return ''.join(out)


def add_conjunct_joiners(text: str) -> str:
    """Insert ZWJ after the virama of the conjuncts written open in Pali."""
    return _JOINED_PATTERN.sub(lambda m: m.group(0)[:2] + ZWJ + m.group(0)[2:], text)
