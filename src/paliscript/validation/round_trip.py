"""Round-trip validation of the script codecs.

A Devanagari word is taken to IPE, out to a target script, back to IPE and
out again. The codec for that script is sound for the word when both the
IPE forms and both target forms agree. When a word fails, its syllables and
then growing windows of consecutive syllables are tested to find the
smallest piece that still fails.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from paliscript.conversion.converter import convert
from paliscript.conversion.ipe import ipe_to_latin
from paliscript.conversion.myanmar import fold_tall_aa
from paliscript.conversion.scripts import VALIDATION_SCRIPTS, Script
from paliscript.conversion.thai import NIKHAHIT, SARA_I, SARA_UE

from .syllables import parse_syllables

logger = logging.getLogger(__name__)


def comparison_form(text: str, script: Script) -> str:
    """Fold spellings a script allows two ways; used only for comparing."""
    if script is Script.MYANMAR:
        return fold_tall_aa(text)
    if script is Script.THAI:
        return text.replace(SARA_UE, SARA_I + NIKHAHIT)
    return text


@dataclass(frozen=True)
class RoundTripResult:
    """Outputs of one round trip of a word through a script."""

    word: str
    script: Script
    ipe1: str
    ipe2: str
    target1: str
    target2: str
    ipe_match: bool
    target_match: bool
    latin1: str
    latin2: str

    @property
    def passed(self) -> bool:
        return self.ipe_match and self.target_match


@dataclass
class WordReport:
    """Verdict for one word across all tested scripts.

    Attributes:
        word: The Devanagari word tested.
        results: Round-trip result per script.
        syllables: The word's syllables, filled in only when it failed.
        failing_syllables: Syllables that fail on their own, per script.
        minimal_failures: Smallest failing substring found per script.
    """

    word: str
    results: Dict[Script, RoundTripResult]
    syllables: List[str] = field(default_factory=list)
    failing_syllables: Dict[Script, List[str]] = field(default_factory=dict)
    minimal_failures: Dict[Script, str] = field(default_factory=dict)

    @property
    def failed_scripts(self) -> List[Script]:
        return [script for script, result in self.results.items() if not result.passed]

    @property
    def passed(self) -> bool:
        return not self.failed_scripts


@dataclass
class ScriptStats:
    passed: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed

    @property
    def success_rate(self) -> float:
        return self.passed / self.total if self.total else 1.0


@dataclass
class BatchReport:
    reports: List[WordReport] = field(default_factory=list)
    stats: Dict[Script, ScriptStats] = field(default_factory=dict)

    @property
    def failures(self) -> List[WordReport]:
        return [report for report in self.reports if not report.passed]

    @property
    def passed(self) -> bool:
        return not self.failures


class RoundTripValidator:
    """Runs round trips for a set of scripts and localizes failures."""

    def __init__(self, scripts: Optional[Iterable[Script]] = None, localize: bool = True):
        self.scripts = list(scripts) if scripts is not None else list(VALIDATION_SCRIPTS)
        self.localize = localize

    def check(self, word: str, script: Script) -> RoundTripResult:
        ipe1 = convert(word, Script.DEVANAGARI, Script.IPE)
        target1 = convert(ipe1, Script.IPE, script)
        ipe2 = convert(target1, script, Script.IPE)
        target2 = convert(ipe2, Script.IPE, script)
        return RoundTripResult(
            word=word,
            script=script,
            ipe1=ipe1,
            ipe2=ipe2,
            target1=target1,
            target2=target2,
            ipe_match=ipe1 == ipe2,
            target_match=comparison_form(target1, script) == comparison_form(target2, script),
            latin1=ipe_to_latin(ipe1),
            latin2=ipe_to_latin(ipe2),
        )

    def _fails(self, text: str, script: Script) -> bool:
        return not self.check(text, script).passed

    def validate_word(self, word: str) -> WordReport:
        word = word.strip()
        report = WordReport(word, {script: self.check(word, script) for script in self.scripts})
        failed = report.failed_scripts
        if not failed:
            logger.debug("%s: passed", word)
            return report

        logger.debug("%s: failed in %s", word, ', '.join(s.value for s in failed))
        if self.localize:
            self._localize(report, failed)
        return report

    def _localize(self, report: WordReport, failed: List[Script]):
        syllables = parse_syllables(report.word)
        report.syllables = syllables
        if len(syllables) < 2:
            return

        # context-free failures: a syllable wrong on its own
        unresolved = []
        for script in failed:
            bad = [s for s in syllables if self._fails(s, script)]
            if bad:
                report.failing_syllables[script] = bad
                report.minimal_failures[script] = bad[0]
            else:
                unresolved.append(script)

        # context failures: smallest window of neighbouring syllables
        for size in range(2, len(syllables) + 1):
            if not unresolved:
                break
            for script in list(unresolved):
                for start in range(len(syllables) - size + 1):
                    window = ''.join(syllables[start:start + size])
                    if self._fails(window, script):
                        report.minimal_failures[script] = window
                        unresolved.remove(script)
                        logger.debug("%s: %s fails on %r", report.word, script.value, window)
                        break

    def validate_batch(self, words: Iterable[str]) -> BatchReport:
        batch = BatchReport(stats={script: ScriptStats() for script in self.scripts})
        for word in words:
            if not word.strip():
                continue
            report = self.validate_word(word)
            batch.reports.append(report)
            for script, result in report.results.items():
                if result.passed:
                    batch.stats[script].passed += 1
                else:
                    batch.stats[script].failed += 1
        logger.info(
            "Validated %d words, %d failed", len(batch.reports), len(batch.failures)
        )
        return batch


def analyze_word(word: str, scripts: Optional[Iterable[Script]] = None) -> WordReport:
    """Round-trip one word through every script and localize any failure."""
    return RoundTripValidator(scripts).validate_word(word)


def validate_words(words: Iterable[str], script: Script) -> BatchReport:
    """Validate a word list against a single target script."""
    return RoundTripValidator([script]).validate_batch(words)
