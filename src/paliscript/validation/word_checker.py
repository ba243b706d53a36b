from typing import List, Set

from paliscript.conversion.ipe import (
    is_ipe_consonant, is_ipe_niggahita, is_ipe_vowel, latin_to_ipe,
)

# Consonant clusters that occur in Pali, in Latin
VALID_CONJUNCTS = [
    "k", "kk", "kkh", "kkhy", "ky", "kl", "kr", "kv",
    "kh", "khy", "khv",
    "g", "gg", "ggh", "gdh", "gy", "gr", "gv",
    "gh",
    "ṅk", "ṅky", "ṅkh", "ṅkhy", "ṅg", "ṅgh",
    "c", "cc", "cch",
    "ch",
    "j", "jj", "jjh",
    "jh",
    "ñ", "ñc", "ñch", "ñj", "ñjh", "ññ", "ñh",
    "ṭ", "ṭṭ", "ṭṭh", "ṭṭhy",
    "ṭh",
    "ḍ", "ḍḍ", "ḍḍh",
    "ḍh",
    "ṇ", "ṇṭ", "ṇṭh", "ṇḍ", "ṇṇ", "ṇy", "ṇh",
    "t", "tt", "tth", "tthy", "tn", "ty", "tr", "tl", "tv",
    "th", "thy",
    "d", "dd", "ddh", "dm", "dy", "dr", "dv",
    "dh", "dhy", "dhv",
    "n", "nt", "nty", "ntr", "ntv", "nth", "nd", "ndr", "ndh", "ndhy", "nn", "ny", "nv", "nh",
    "p", "pp", "pph", "py", "pr", "pl",
    "ph",
    "b", "bb", "bbh", "by", "br", "bl", "bv",
    "bh", "bhy",
    "m", "mp", "mph", "mb", "mbh", "mm", "my", "mh",
    "y", "yy", "yv", "yh",
    "r", "rr",
    "l", "ly", "ll",
    "v", "vy", "vv", "vh",
    "s", "st", "sth", "sn", "sp", "sm", "sy", "sv", "ss",
    "h", "hm", "hy", "hv",
    "ḷ", "ḷv", "ḷh",
]

# Words that break a rule but are attested
VALID_WORDS = ["ṅa"]


class IpeWordChecker:
    """Heuristics that flag IPE strings which cannot be Pali words.

    Used to spot conversion output that has drifted out of Pali phonotactics,
    e.g. a lost inherent vowel leaving a word-final consonant.
    """

    def __init__(self):
        self.valid_conjuncts: Set[str] = {latin_to_ipe(c) for c in VALID_CONJUNCTS}
        self.valid_words: Set[str] = {latin_to_ipe(w) for w in VALID_WORDS}

    def is_bad(self, word: str) -> bool:
        if word in self.valid_words:
            return False
        return (self.has_sequential_vowels(word, 3)
                or self.starts_with_two_vowels(word)
                or self.ends_with_two_vowels(word)
                or self.ends_with_consonant(word)
                or self.starts_with_niggahita(word)
                or self.has_niggahita_after_consonant(word)
                or self.has_sequential_niggahitas(word, 2)
                or self.has_invalid_conjuncts(word))

    def reasons(self, word: str) -> List[str]:
        """Names of the rules ``word`` breaks."""
        if word in self.valid_words:
            return []
        checks = [
            ('three vowels in a row', self.has_sequential_vowels(word, 3)),
            ('starts with two vowels', self.starts_with_two_vowels(word)),
            ('ends with two vowels', self.ends_with_two_vowels(word)),
            ('ends with a consonant', self.ends_with_consonant(word)),
            ('starts with niggahita', self.starts_with_niggahita(word)),
            ('niggahita after a consonant', self.has_niggahita_after_consonant(word)),
            ('two niggahitas in a row', self.has_sequential_niggahitas(word, 2)),
            ('invalid consonant cluster', self.has_invalid_conjuncts(word)),
        ]
        return [name for name, broken in checks if broken]

    @staticmethod
    def _longest_run(word: str, predicate) -> int:
        longest = run = 0
        for char in word:
            run = run + 1 if predicate(char) else 0
            longest = max(longest, run)
        return longest

    def has_sequential_vowels(self, word: str, n: int) -> bool:
        return self._longest_run(word, is_ipe_vowel) >= n

    def has_sequential_niggahitas(self, word: str, n: int) -> bool:
        return self._longest_run(word, is_ipe_niggahita) >= n

    def starts_with_two_vowels(self, word: str) -> bool:
        return len(word) >= 2 and is_ipe_vowel(word[0]) and is_ipe_vowel(word[1])

    def ends_with_two_vowels(self, word: str) -> bool:
        return len(word) >= 2 and is_ipe_vowel(word[-1]) and is_ipe_vowel(word[-2])

    def ends_with_consonant(self, word: str) -> bool:
        return len(word) > 0 and is_ipe_consonant(word[-1])

    def starts_with_niggahita(self, word: str) -> bool:
        return len(word) > 0 and is_ipe_niggahita(word[0])

    def has_niggahita_after_consonant(self, word: str) -> bool:
        return any(
            is_ipe_niggahita(char) and is_ipe_consonant(word[i - 1])
            for i, char in enumerate(word) if i > 0
        )

    def consonant_clusters(self, word: str) -> List[str]:
        clusters = []
        current = ''
        for char in word:
            if is_ipe_consonant(char):
                current += char
            else:
                if current:
                    clusters.append(current)
                current = ''
        if current:
            clusters.append(current)
        return clusters

    def has_invalid_conjuncts(self, word: str) -> bool:
        return any(c not in self.valid_conjuncts for c in self.consonant_clusters(word))
