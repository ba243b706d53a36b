import pytest

from paliscript.validation.syllables import parse_syllables, phonetic_characters


@pytest.mark.parametrize('word, syllables', [
    ('संखित्तेन', ['सं', 'खि', 'त्ते', 'न']),
    ('बुद्ध', ['बु', 'द्ध']),
    ('अत्थि', ['अ', 'त्थि']),
    ('भिक्खू', ['भि', 'क्खू']),
    ('अं', ['अं']),
    ('धम्मो।', ['ध', 'म्मो']),
])
def test_parse(word, syllables):
    assert parse_syllables(word) == syllables


def test_joiner_does_not_break_a_cluster():
    assert parse_syllables('पक्\u200dक') == ['प', 'क्क']


def test_orphan_vowel_sign_is_its_own_syllable():
    assert parse_syllables('ा') == ['ा']


def test_empty():
    assert parse_syllables('') == []
    assert parse_syllables('।') == []


@pytest.mark.parametrize('text', ['बुद्धं सरणं गच्छामि।', 'पक्\u200dक', 'इति पि सो भगवा'])
def test_syllables_cover_phonetic_characters(text):
    assert ''.join(parse_syllables(text)) == phonetic_characters(text)
