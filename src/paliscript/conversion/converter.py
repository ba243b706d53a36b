"""Route a conversion between any two scripts.

Devanagari is the hub: every table-driven script converts to and from it.
Latin and IPE convert to each other directly, Latin reaches Devanagari by
its own letter-by-letter builder, and IPE reaches Devanagari through Latin.
"""

import logging
from typing import Iterable, List, Tuple

from .ipe import deva_to_ipe, ipe_to_deva, ipe_to_latin, latin_to_ipe
from .latin import deva_to_latin, latin_to_deva, to_title_case
from .registry import get_codec
from .scripts import Script, UnsupportedScriptPair, detect_script

logger = logging.getLogger(__name__)


def convert(text: str, source: Script, target: Script, title_case: bool = False) -> str:
    """Convert ``text`` from ``source`` to ``target`` script."""
    if target is Script.UNKNOWN:
        raise UnsupportedScriptPair(source, target)
    result = _convert(text, source, target)
    if title_case:
        result = to_title_case(result)
    return result


def _convert(text: str, source: Script, target: Script) -> str:
    if source is target:
        return text
    if source is Script.UNKNOWN:
        return _convert_mixed(text, target)
    if source is Script.IPE:
        if target is Script.LATIN:
            return ipe_to_latin(text)
        return from_devanagari(ipe_to_deva(text), target)
    if source is Script.LATIN:
        if target is Script.IPE:
            return latin_to_ipe(text)
        return from_devanagari(latin_to_deva(text), target)
    return from_devanagari(to_devanagari(text, source), target)


def to_devanagari(text: str, source: Script) -> str:
    if source is Script.DEVANAGARI:
        return text
    if source is Script.LATIN:
        return latin_to_deva(text)
    if source is Script.IPE:
        return ipe_to_deva(text)
    return get_codec(source).to_devanagari(text)


def from_devanagari(text: str, target: Script) -> str:
    if target is Script.DEVANAGARI:
        return text
    if target is Script.IPE:
        return deva_to_ipe(text)
    if target is Script.LATIN:
        return deva_to_latin(text)
    return get_codec(target).from_devanagari(text)


def split_script_runs(text: str) -> List[Tuple[Script, str]]:
    """Split text into runs of one detected script.

    Characters that belong to no known block (spaces, punctuation, combining
    marks) stay with the run they appear in.
    """
    runs: List[Tuple[Script, str]] = []
    current = Script.UNKNOWN
    buffer = ''
    for char in text:
        script = detect_script(char)
        if script is Script.UNKNOWN or script is current or not buffer:
            if current is Script.UNKNOWN:
                current = script
            buffer += char
            continue
        runs.append((current, buffer))
        current = script
        buffer = char
    if buffer:
        runs.append((current, buffer))
    return runs


def _convert_mixed(text: str, target: Script) -> str:
    parts = []
    for script, run in split_script_runs(text):
        if script is Script.UNKNOWN:
            parts.append(run)
            continue
        logger.debug("Detected %s run: %r", script.value, run)
        parts.append(_convert(run, script, target))
    return ''.join(parts)


def any_to_devanagari(text: str) -> str:
    return convert(text, Script.UNKNOWN, Script.DEVANAGARI)


def any_to_ipe(text: str) -> str:
    return convert(text, Script.UNKNOWN, Script.IPE)


def ipe_sort_key(text: str, script: Script = Script.DEVANAGARI) -> str:
    """Key that orders words of any script in Pali alphabetical order."""
    return convert(text, script, Script.IPE)


def sort_pali(words: Iterable[str], script: Script = Script.DEVANAGARI) -> List[str]:
    return sorted(words, key=lambda word: ipe_sort_key(word, script))
