from enum import Enum
from typing import Dict, List, Tuple


class Script(Enum):
    """Writing systems known to the converter, including the two pivots."""

    UNKNOWN = 'unknown'
    BENGALI = 'bengali'
    CYRILLIC = 'cyrillic'
    DEVANAGARI = 'devanagari'
    GUJARATI = 'gujarati'
    GURMUKHI = 'gurmukhi'
    KANNADA = 'kannada'
    KHMER = 'khmer'
    LATIN = 'latin'
    MALAYALAM = 'malayalam'
    MYANMAR = 'myanmar'
    SINHALA = 'sinhala'
    TELUGU = 'telugu'
    THAI = 'thai'
    TIBETAN = 'tibetan'
    IPE = 'ipe'

    @classmethod
    def parse(cls, name: str) -> 'Script':
        """Look up a script by member name, value or ISO 15924 code."""
        key = name.strip().lower()
        for script in cls:
            if key in (script.value, script.name.lower(), ISO_15924_CODES.get(script)):
                return script
        raise ValueError(f"Unknown script: {name!r}")


class UnsupportedScriptPair(ValueError):
    """Raised when no conversion path exists between two scripts."""

    def __init__(self, source: Script, target: Script):
        self.source = source
        self.target = target
        super().__init__(f"No conversion from {source.value} to {target.value}")


ISO_15924_CODES: Dict[Script, str] = {
    Script.BENGALI: 'beng',
    Script.CYRILLIC: 'cyrl',
    Script.DEVANAGARI: 'deva',
    Script.GUJARATI: 'gujr',
    Script.GURMUKHI: 'guru',
    Script.KANNADA: 'knda',
    Script.KHMER: 'khmr',
    Script.LATIN: 'latn',
    Script.MALAYALAM: 'mlym',
    Script.MYANMAR: 'mymr',
    Script.SINHALA: 'sinh',
    Script.TELUGU: 'telu',
    Script.THAI: 'thai',
    Script.TIBETAN: 'tibt',
}

# Scripts a Devanagari word is round-tripped through during validation
VALIDATION_SCRIPTS: List[Script] = [
    Script.BENGALI, Script.CYRILLIC, Script.GUJARATI, Script.GURMUKHI,
    Script.KANNADA, Script.KHMER, Script.LATIN, Script.MALAYALAM,
    Script.MYANMAR, Script.SINHALA, Script.TELUGU, Script.THAI,
    Script.TIBETAN,
]

# Unicode blocks used to guess the script of unlabelled input
SCRIPT_BLOCKS: List[Tuple[int, int, Script]] = [
    (0x0041, 0x005A, Script.LATIN),
    (0x0061, 0x007A, Script.LATIN),
    (0x00C0, 0x024F, Script.LATIN),
    (0x1E00, 0x1EFF, Script.LATIN),
    (0x0400, 0x04FF, Script.CYRILLIC),
    (0x0900, 0x097F, Script.DEVANAGARI),
    (0x0980, 0x09FF, Script.BENGALI),
    (0x0A00, 0x0A7F, Script.GURMUKHI),
    (0x0A80, 0x0AFF, Script.GUJARATI),
    (0x0C00, 0x0C7F, Script.TELUGU),
    (0x0C80, 0x0CFF, Script.KANNADA),
    (0x0D00, 0x0D7F, Script.MALAYALAM),
    (0x0D80, 0x0DFF, Script.SINHALA),
    (0x0E00, 0x0E7F, Script.THAI),
    (0x0F00, 0x0FFF, Script.TIBETAN),
    (0x1000, 0x109F, Script.MYANMAR),
    (0x1780, 0x17FF, Script.KHMER),
]


def iso15924_code(script: Script) -> str:
    """Lowercase ISO 15924 code, or an empty string for the pivots."""
    return ISO_15924_CODES.get(script, '')


def detect_script(char: str) -> Script:
    code_point = ord(char)
    for start, end, script in SCRIPT_BLOCKS:
        if start <= code_point <= end:
            return script
    return Script.UNKNOWN
