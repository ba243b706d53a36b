import pytest

from paliscript.conversion.book import (
    CAPITAL_MARKER, cleanup_punctuation, convert_book, mark_capitals,
)
from paliscript.conversion.converter import convert
from paliscript.conversion.scripts import Script, UnsupportedScriptPair


def paragraph(text, rend='bodytext'):
    return f'<p rend="{rend}">{text}</p>'


def test_devanagari_is_unchanged():
    text = paragraph('धम्मो।')
    assert convert_book(text, Script.DEVANAGARI) == text


def test_pivot_targets_raise():
    with pytest.raises(UnsupportedScriptPair):
        convert_book(paragraph('धम्मो।'), Script.IPE)


def test_stylesheet_renamed():
    text = '<?xml-stylesheet type="text/xsl" href="tipitaka-deva.xsl"?>'
    assert 'tipitaka-latn.xsl' in convert_book(text, Script.LATIN)
    assert 'tipitaka-thai.xsl' in convert_book(text, Script.THAI)


def test_latin_sentences_capitalised():
    result = convert_book(paragraph('बुद्धो भगवा। धम्मो।'), Script.LATIN)
    assert result == paragraph('Buddho bhagavā. Dhammo.')


def test_notes_do_not_start_sentences():
    marked = mark_capitals(paragraph('धम्मो <note>बुद्धो</note> सङ्घो।'))
    assert marked.count(CAPITAL_MARKER) == 1


def test_gatha_punctuation():
    result = convert_book(paragraph('धम्मो। बुद्धो॥', 'gatha1'), Script.LATIN)
    assert result == paragraph('Dhammo; Buddho.', 'gatha1')


def test_centre_double_danda_removed():
    result = convert_book(paragraph('नमो तस्स॥', 'centre'), Script.LATIN)
    assert result == paragraph('Namo tassa', 'centre')


def test_abbreviation_before_ellipsis():
    result = convert_book(paragraph('धम्मो पे॰… बुद्धो।'), Script.LATIN)
    assert result == paragraph('Dhammo pe… buddho.')


def test_khmer_khan():
    result = convert_book(paragraph('धम्मो।'), Script.KHMER)
    assert '។' in result
    assert '।' not in result


def test_tibetan_shad():
    result = convert_book(paragraph('धम्मो। बुद्धो॥'), Script.TIBETAN)
    assert '།' in result and '༎' in result


def test_tibetan_gatha_uses_default_punctuation():
    result = convert_book(paragraph('धम्मो। बुद्धो॥', 'gatha1'), Script.TIBETAN)
    dhammo = convert('धम्मो', Script.DEVANAGARI, Script.TIBETAN)
    buddho = convert('बुद्धो', Script.DEVANAGARI, Script.TIBETAN)
    assert result == paragraph(f'{dhammo}; {buddho}.', 'gatha1')


@pytest.mark.parametrize('script', [Script.KHMER, Script.MYANMAR])
def test_abbreviation_sign_becomes_period(script):
    result = convert_book(paragraph('पे॰ धम्मो।'), script)
    assert '॰' not in result
    assert convert('पे', Script.DEVANAGARI, script) + '. ' in result


def test_khmer_abbreviation():
    result = convert_book(paragraph('पे॰ धम्मो।'), Script.KHMER)
    assert result == paragraph('\u1794\u17c1. \u1792\u1798\u17d2\u1798\u17c4\u17d4')


def test_cyrillic_abbreviation_before_ellipsis():
    result = convert_book(paragraph('पे॰…'), Script.CYRILLIC)
    assert result == paragraph('\u0431\u0437…')


def test_myanmar_punctuation():
    result = convert_book(paragraph('धम्मो …पो॰… बुद्धो, सङ्घो।'), Script.MYANMAR)
    assert '။ပေ။' in result
    assert '၊' in result
    assert result.endswith('။</p>')


def test_cleanup_punctuation():
    assert cleanup_punctuation('a  b .') == 'a b.'
    assert cleanup_punctuation('a , b ?') == 'a, b?'
