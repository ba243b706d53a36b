from enum import Enum
from typing import List

from paliscript.conversion.devanagari import (
    VIRAMA, is_consonant, is_dependent_vowel, is_independent_vowel, is_nasal,
)


class ParserState(Enum):
    SCANNING = 0
    IN_CONSONANT_CLUSTER = 1
    IN_VOWEL_TAIL = 2


class SyllableParser:
    """Split Devanagari words into syllables (aksharas).

    A syllable is an independent vowel, or a consonant cluster joined by
    viramas, each optionally followed by a dependent vowel sign and then a
    nasal mark. Characters outside that inventory are skipped without
    closing the syllable being built, so joining the syllables gives back
    the word's phonetic characters in order.
    """

    def parse(self, word: str) -> List[str]:
        syllables: List[str] = []
        current = ''
        state = ParserState.SCANNING

        def close():
            nonlocal current, state
            if current:
                syllables.append(current)
            current = ''
            state = ParserState.SCANNING

        for char in word:
            if is_independent_vowel(char):
                close()
                current = char
                state = ParserState.IN_VOWEL_TAIL

            elif is_consonant(char):
                if state is ParserState.IN_CONSONANT_CLUSTER and current.endswith(VIRAMA):
                    # conjunct consonant joins the open cluster
                    current += char
                else:
                    close()
                    current = char
                    state = ParserState.IN_CONSONANT_CLUSTER

            elif char == VIRAMA:
                if state is ParserState.IN_CONSONANT_CLUSTER:
                    current += char
                else:
                    close()
                    syllables.append(char)

            elif is_dependent_vowel(char):
                if state is ParserState.IN_CONSONANT_CLUSTER:
                    current += char
                    state = ParserState.IN_VOWEL_TAIL
                else:
                    close()
                    syllables.append(char)

            elif is_nasal(char):
                if state is ParserState.SCANNING:
                    syllables.append(char)
                else:
                    current += char
                    close()

        close()
        return syllables


_parser = SyllableParser()


def parse_syllables(word: str) -> List[str]:
    return _parser.parse(word)


def phonetic_characters(word: str) -> str:
    """The characters of ``word`` that syllable parsing keeps."""
    return ''.join(
        char for char in word
        if is_consonant(char) or is_independent_vowel(char) or is_dependent_vowel(char)
        or is_nasal(char) or char == VIRAMA
    )
