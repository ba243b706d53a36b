import pytest

from paliscript.conversion.converter import (
    any_to_devanagari, any_to_ipe, convert, sort_pali, split_script_runs,
)
from paliscript.conversion.registry import get_codec
from paliscript.conversion.scripts import Script, UnsupportedScriptPair, detect_script


def test_identity():
    assert convert('बुद्ध', Script.DEVANAGARI, Script.DEVANAGARI) == 'बुद्ध'
    assert convert('anything', Script.THAI, Script.THAI) == 'anything'


def test_devanagari_to_latin():
    assert convert('बुद्ध', Script.DEVANAGARI, Script.LATIN) == 'buddha'


def test_title_case():
    assert convert('बुद्ध धम्म', Script.DEVANAGARI, Script.LATIN, title_case=True) == 'Buddha Dhamma'


def test_latin_reaches_other_scripts_through_devanagari():
    thai = get_codec(Script.THAI).from_devanagari('बुद्ध')
    assert convert('buddha', Script.LATIN, Script.THAI) == thai
    assert convert(thai, Script.THAI, Script.LATIN) == 'buddha'


def test_latin_and_ipe_convert_directly():
    ipe = convert('saṃkhittena', Script.LATIN, Script.IPE)
    assert convert(ipe, Script.IPE, Script.LATIN) == 'saṃkhittena'
    assert convert(ipe, Script.IPE, Script.DEVANAGARI) == 'संखित्तेन'


def test_non_pali_latin_is_copied():
    assert convert('Buddha XYZ', Script.LATIN, Script.DEVANAGARI) == 'बुद्ध XYZ'


def test_between_two_codecs():
    khmer = convert('संखित्तेन', Script.DEVANAGARI, Script.KHMER)
    sinhala = convert(khmer, Script.KHMER, Script.SINHALA)
    assert convert(sinhala, Script.SINHALA, Script.DEVANAGARI) == 'संखित्तेन'


def test_unknown_target_raises():
    with pytest.raises(UnsupportedScriptPair):
        convert('बुद्ध', Script.DEVANAGARI, Script.UNKNOWN)


def test_unsupported_pair_is_a_value_error():
    with pytest.raises(ValueError):
        convert('x', Script.LATIN, Script.UNKNOWN)


def test_detect_script():
    assert detect_script('क') is Script.DEVANAGARI
    assert detect_script('k') is Script.LATIN
    assert detect_script('ก') is Script.THAI
    assert detect_script(' ') is Script.UNKNOWN


def test_split_script_runs():
    assert split_script_runs('ka कि') == [(Script.LATIN, 'ka '), (Script.DEVANAGARI, 'कि')]


def test_mixed_input():
    assert convert('buddha बुद्ध', Script.UNKNOWN, Script.DEVANAGARI) == 'बुद्ध बुद्ध'
    assert any_to_devanagari('buddha') == 'बुद्ध'
    assert any_to_ipe('buddha') == any_to_ipe('बुद्ध')


def test_thai_leading_vowel_order_does_not_matter():
    assert convert('เก', Script.THAI, Script.DEVANAGARI) == convert('กเ', Script.THAI, Script.DEVANAGARI)


def test_sort_pali_uses_pali_order():
    # kha sorts after ke in Pali though the Thai code points say otherwise
    assert sort_pali(['ข', 'เก'], Script.THAI) == ['เก', 'ข']
    assert sort_pali(['ta', 'ṭa', 'a'], Script.LATIN) == ['a', 'ṭa', 'ta']
