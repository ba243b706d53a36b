"""
Select a small word list that covers every syllable seen in a corpus.

Running the round-trip validator over a whole corpus is slow. Keeping only
the words that bring a new initial syllable, a new medial or final syllable,
or a new medial independent-vowel pattern gives a list that exercises the
same conversions in a fraction of the time.
"""

import csv
import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Set

from paliscript.conversion.converter import convert
from paliscript.conversion.devanagari import (
    ANUSVARA, is_consonant, is_dependent_vowel, is_independent_vowel,
)
from paliscript.conversion.scripts import Script

from .syllables import parse_syllables

logger = logging.getLogger(__name__)

TAG = re.compile(r'<[^>]*>')
DEVANAGARI_WORD = re.compile(r"[\u0900-\u0963\u0970-\u097f\u200c\u200d]+")


def words_from_text(text: str) -> List[str]:
    """Devanagari words of ``text``, with any XML markup removed."""
    return DEVANAGARI_WORD.findall(TAG.sub(' ', text))


def medial_vowel_patterns(word: str) -> List[str]:
    """Non-initial independent vowels and what precedes them.

    These spellings are the ones most likely to break a round trip, so each
    distinct combination counts as new coverage.
    """
    patterns = []
    for i in range(len(word) - 1):
        char, following = word[i], word[i + 1]
        after_nasal = word[i + 2] if following == ANUSVARA and i + 2 < len(word) else ''

        if is_dependent_vowel(char):
            if is_independent_vowel(following):
                patterns.append(f"dep_{ord(char):04X}_indep_{ord(following):04X}")
            if after_nasal and is_independent_vowel(after_nasal):
                patterns.append(f"dep_{ord(char):04X}_nigg_indep_{ord(after_nasal):04X}")

        if is_consonant(char) and after_nasal and is_independent_vowel(after_nasal):
            patterns.append(f"cons_{ord(char):04X}_nigg_indep_{ord(after_nasal):04X}")
    return patterns


@dataclass
class SyllableInfo:
    count: int
    first_source: str


class SyllableExtractor:
    def __init__(self):
        self.initial_syllables: Set[str] = set()
        self.medial_final_syllables: Set[str] = set()
        self.vowel_patterns: Set[str] = set()
        self.stats: Dict[str, SyllableInfo] = {}
        self.selected: List[str] = []

    def add_word(self, word: str, source: str = '') -> bool:
        """Record ``word``; return True when it adds new coverage."""
        word = word.strip()
        if not word:
            return False
        syllables = parse_syllables(word)
        if not syllables:
            return False

        new_pattern = False
        for pattern in medial_vowel_patterns(word):
            if pattern not in self.vowel_patterns:
                self.vowel_patterns.add(pattern)
                new_pattern = True

        for syllable in syllables:
            if syllable in self.stats:
                self.stats[syllable].count += 1
            else:
                self.stats[syllable] = SyllableInfo(1, source)

        new_syllable = False
        if syllables[0] not in self.initial_syllables:
            self.initial_syllables.add(syllables[0])
            new_syllable = True
        for syllable in syllables[1:]:
            if syllable not in self.medial_final_syllables:
                self.medial_final_syllables.add(syllable)
                new_syllable = True

        if new_syllable or new_pattern:
            self.selected.append(word)
            return True
        return False

    def select(self, words: Iterable[str], source: str = '') -> List[str]:
        """Feed ``words`` in order and return the covering list so far."""
        seen = 0
        for word in words:
            seen += 1
            self.add_word(word, source)
        logger.info("Selected %d of %d words", len(self.selected), seen)
        return list(self.selected)

    def sorted_stats(self) -> List[tuple]:
        """(syllable, latin, count, first source), most frequent first."""
        rows = [
            (syllable, convert(syllable, Script.DEVANAGARI, Script.LATIN), info.count, info.first_source)
            for syllable, info in self.stats.items()
        ]
        rows.sort(key=lambda row: (-row[2], row[0]))
        return rows

    def write_csv(self, path: str):
        with open(path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(['syllable', 'latin', 'count', 'first_source'])
            writer.writerows(self.sorted_stats())
