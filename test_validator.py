import dataclasses

import pytest

from paliscript.conversion.converter import convert
from paliscript.conversion.cyrillic import CONSONANTS as CYRILLIC_CONSONANTS
from paliscript.conversion.devanagari import (
    ANUSVARA, PALI_CONSONANTS, PALI_MATRAS, PALI_VOWELS, VIRAMA,
)
from paliscript.conversion.ipe import deva_to_ipe, ipe_to_deva
from paliscript.conversion.latin import LATIN_CONSONANTS
from paliscript.conversion.scripts import VALIDATION_SCRIPTS, Script
from paliscript.validation.round_trip import (
    RoundTripValidator, analyze_word, comparison_form, validate_words,
)


class FailingOn(RoundTripValidator):
    """Validator that fails every text containing ``piece``."""

    def __init__(self, piece, scripts):
        super().__init__(scripts)
        self.piece = piece

    def check(self, word, script):
        result = super().check(word, script)
        if self.piece in word:
            return dataclasses.replace(result, ipe_match=False)
        return result


def test_buddha_through_thai():
    result = RoundTripValidator([Script.THAI]).check('बुद्ध', Script.THAI)
    assert result.ipe1 == result.ipe2
    assert result.latin1 == 'buddha'
    assert result.passed


def test_nasal_stays_with_its_syllable_in_khmer():
    result = RoundTripValidator([Script.KHMER]).check('संखित्तेन', Script.KHMER)
    assert result.target1.startswith('\u179f\u17c6')
    assert result.passed


def test_bare_final_consonant_through_latin():
    result = RoundTripValidator([Script.LATIN]).check('सम्', Script.LATIN)
    assert result.target1 == 'sam'
    assert result.passed
    assert convert(result.target1, Script.LATIN, Script.DEVANAGARI) == 'सम्'


def test_passing_word_is_not_localized():
    report = analyze_word('बुद्ध', [Script.THAI, Script.TIBETAN])
    assert report.passed
    assert report.syllables == []
    assert report.minimal_failures == {}


def test_failing_syllable_found():
    report = FailingOn('त्ते', [Script.THAI]).validate_word('संखित्तेन')
    assert report.failed_scripts == [Script.THAI]
    assert report.syllables == ['सं', 'खि', 'त्ते', 'न']
    assert report.failing_syllables[Script.THAI] == ['त्ते']
    assert report.minimal_failures[Script.THAI] == 'त्ते'


def test_failure_across_syllables_found_by_window():
    report = FailingOn('खित्', [Script.THAI]).validate_word('संखित्तेन')
    assert Script.THAI not in report.failing_syllables
    assert report.minimal_failures[Script.THAI] == 'खित्ते'


def test_localization_can_be_switched_off():
    validator = FailingOn('त्ते', [Script.THAI])
    validator.localize = False
    report = validator.validate_word('संखित्तेन')
    assert not report.passed
    assert report.syllables == []


def test_batch_statistics():
    scripts = [Script.THAI, Script.KHMER, Script.LATIN, Script.TIBETAN]
    batch = RoundTripValidator(scripts).validate_batch(['बुद्ध', 'धम्मो', '', 'संघो'])
    assert len(batch.reports) == 3
    assert batch.passed
    for script in scripts:
        assert batch.stats[script].passed == 3
        assert batch.stats[script].success_rate == 1.0


def test_batch_counts_failures():
    batch = FailingOn('त्ते', [Script.THAI]).validate_batch(['बुद्ध', 'संखित्तेन'])
    assert [report.word for report in batch.failures] == ['संखित्तेन']
    assert batch.stats[Script.THAI].failed == 1
    assert batch.stats[Script.THAI].success_rate == 0.5


def test_validate_words_single_script():
    batch = validate_words(['बुद्ध'], Script.KHMER)
    assert list(batch.stats) == [Script.KHMER]
    assert batch.passed


def test_comparison_form():
    assert comparison_form('\u1015\u102b', Script.MYANMAR) == '\u1015\u102c'
    assert comparison_form('กึ', Script.THAI) == 'กิํ'
    assert comparison_form('\u1015\u102b', Script.KHMER) == '\u1015\u102b'


def inventory():
    """Bare and vowelled consonants, nasalised syllables and two-consonant clusters."""
    words = []
    for vowel in PALI_VOWELS:
        words += [vowel, vowel + ANUSVARA]
    for consonant in PALI_CONSONANTS:
        for sign in [''] + list(PALI_MATRAS):
            words += [consonant + sign, consonant + sign + ANUSVARA]
    for first in PALI_CONSONANTS:
        for second in PALI_CONSONANTS:
            words.append('अ' + first + VIRAMA + second + 'ो')
    return words


# scripts that spell aspirates as consonant + h, so a stop followed by h reads as one letter
DIGRAPH_SPELLINGS = {
    Script.LATIN: dict(zip(PALI_CONSONANTS, LATIN_CONSONANTS)),
    Script.CYRILLIC: dict(zip(PALI_CONSONANTS, CYRILLIC_CONSONANTS)),
}


def reads_as_aspirate(word, script):
    spellings = DIGRAPH_SPELLINGS.get(script)
    if spellings is None:
        return False
    letters = set(spellings.values())
    return any(
        spellings[first] + spellings['ह'] in letters
        for first in PALI_CONSONANTS
        if first + VIRAMA + 'ह' in word
    )


def test_pivot_is_stable_over_inventory():
    unstable = []
    for word in inventory():
        ipe = deva_to_ipe(word)
        if deva_to_ipe(ipe_to_deva(ipe)) != ipe:
            unstable.append(word)
    assert unstable == []


@pytest.mark.parametrize('script', VALIDATION_SCRIPTS, ids=lambda s: s.value)
def test_round_trip_over_inventory(script):
    validator = RoundTripValidator([script], localize=False)
    failures = [
        word for word in inventory()
        if not reads_as_aspirate(word, script) and not validator.check(word, script).passed
    ]
    assert failures == []


@pytest.mark.parametrize('script, aspirate', [
    (Script.LATIN, 'अखो'),
    (Script.CYRILLIC, 'अघो'),
], ids=['latin', 'cyrillic'])
def test_stop_and_h_read_back_as_aspirate(script, aspirate):
    assert reads_as_aspirate('अक्हो', script)
    spelled = convert('अक्हो', Script.DEVANAGARI, script)
    assert convert(spelled, script, Script.DEVANAGARI) == aspirate
