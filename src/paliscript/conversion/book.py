"""Whole-document conversion of Devanagari Tipitaka XML.

Besides converting the text, a book needs its sentence punctuation adapted
to the target script: dandas become periods, semicolons or the script's own
stops depending on the paragraph they sit in.
"""

import re
from typing import Dict, List, Optional

from .converter import convert
from .devanagari import ABBREVIATION_SIGN, DANDA, DOUBLE_DANDA
from .latin import PALI_LETTERS
from .scripts import Script, UnsupportedScriptPair, iso15924_code

ELLIPSIS = '…'

BOOK_PARAGRAPH_ELEMENTS = ['p', 'head', 'trailer']
BOOK_IGNORE_ELEMENTS = ['note']
CAPITAL_MARKER = '\ue000'

GATHA_PARAGRAPH = re.compile(r'<p rend="gatha[a-z0-9]*".+?</p>', re.DOTALL)
CENTRE_PARAGRAPH = re.compile(r'<p rend="centre".+?</p>', re.DOTALL)
TAG = re.compile(r'(<[^>]*>)')
TAG_NAME = re.compile(r'<\s*(/?)\s*([A-Za-z_][\w.\-]*)')
CAPITAL_TARGET = re.compile(CAPITAL_MARKER + '([' + re.escape(''.join(sorted(PALI_LETTERS))) + '])')


class DandaStyle:
    """Replacement strings for dandas in the three paragraph contexts."""

    def __init__(self, gatha_single: str = ';', gatha_double: str = '.',
                 centre_double: str = '', single: str = '.', double: str = '.'):
        self.gatha_single = gatha_single
        self.gatha_double = gatha_double
        self.centre_double = centre_double
        self.single = single
        self.double = double


KHAN = '។'
MYANMAR_SECTION = '။'
MYANMAR_LITTLE_SECTION = '၊'

DANDA_STYLES: Dict[Script, DandaStyle] = {
    Script.KHMER: DandaStyle(';', KHAN, KHAN, KHAN, KHAN),
    Script.TIBETAN: DandaStyle(';', '.', '', '།', '༎'),
}
DEFAULT_STYLE = DandaStyle()


def convert_dandas(text: str, style: DandaStyle) -> str:
    def gatha(match):
        return match.group(0).replace(DANDA, style.gatha_single).replace(DOUBLE_DANDA, style.gatha_double)

    def centre(match):
        return match.group(0).replace(DOUBLE_DANDA, style.centre_double)

    text = GATHA_PARAGRAPH.sub(gatha, text)
    text = CENTRE_PARAGRAPH.sub(centre, text)
    return text.replace(DANDA, style.single).replace(DOUBLE_DANDA, style.double)


def convert_myanmar_dandas(text: str) -> str:
    def gatha(match):
        return (match.group(0)
                .replace(',', MYANMAR_LITTLE_SECTION)
                .replace(DANDA, MYANMAR_SECTION)
                .replace(DOUBLE_DANDA, MYANMAR_SECTION))

    text = GATHA_PARAGRAPH.sub(gatha, text)
    text = text.replace(DANDA, MYANMAR_SECTION).replace(DOUBLE_DANDA, MYANMAR_SECTION)
    text = text.replace(',', MYANMAR_LITTLE_SECTION)
    return text.replace(ELLIPSIS, MYANMAR_SECTION)


def cleanup_punctuation(text: str) -> str:
    """Collapse double spaces and drop spaces before closing punctuation."""
    text = text.replace('  ', ' ')
    for mark in ',?!;.':
        text = text.replace(' ' + mark, mark)
    return text


def _tag_name(tag: str) -> Optional[tuple]:
    match = TAG_NAME.match(tag)
    if match is None:
        return None
    closing = match.group(1) == '/'
    self_closing = tag.rstrip('>').rstrip().endswith('/')
    return match.group(2), closing, self_closing


def mark_capitals(text: str,
                  paragraph_elements: List[str] = BOOK_PARAGRAPH_ELEMENTS,
                  ignore_elements: List[str] = BOOK_IGNORE_ELEMENTS,
                  marker: str = CAPITAL_MARKER) -> str:
    """Mark the first Devanagari letter of every sentence in the markup.

    A sentence starts at the opening tag of a paragraph element and after a
    danda, question mark or exclamation mark. Text inside ignored elements
    (notes) is neither marked nor able to start a sentence.
    """
    out = []
    next_is_capital = False
    ignore_depth = 0
    for token in TAG.split(text):
        if not token:
            continue
        if token.startswith('<'):
            parsed = _tag_name(token)
            if parsed is not None:
                name, closing, self_closing = parsed
                if name in ignore_elements and not self_closing:
                    ignore_depth += -1 if closing else 1
                    ignore_depth = max(ignore_depth, 0)
                elif name in paragraph_elements and not closing and ignore_depth == 0:
                    next_is_capital = True
            out.append(token)
            continue
        if ignore_depth:
            out.append(token)
            continue
        for char in token:
            if next_is_capital and 0x0901 <= ord(char) <= 0x094B:
                out.append(marker)
                next_is_capital = False
            elif char in (DANDA, '?', '!'):
                next_is_capital = True
            out.append(char)
    return ''.join(out)


def capitalize_marked(latin: str, marker: str = CAPITAL_MARKER) -> str:
    latin = CAPITAL_TARGET.sub(lambda m: m.group(1).upper(), latin)
    return latin.replace(marker, '')


def convert_book(text: str, target: Script) -> str:
    """Convert a Devanagari book to ``target`` with its punctuation rules."""
    if target is Script.DEVANAGARI:
        return text
    code = iso15924_code(target)
    if not code:
        raise UnsupportedScriptPair(Script.DEVANAGARI, target)

    text = text.replace('tipitaka-deva.xsl', f'tipitaka-{code}.xsl')

    if target is Script.LATIN:
        text = mark_capitals(text)
    if target in (Script.LATIN, Script.CYRILLIC):
        # no fourth dot after pe
        text = text.replace(ABBREVIATION_SIGN + ELLIPSIS, ELLIPSIS)
    elif target is Script.MYANMAR:
        text = text.replace(
            ELLIPSIS + 'पो' + ABBREVIATION_SIGN + ELLIPSIS,
            MYANMAR_SECTION + 'ပေ' + MYANMAR_SECTION,
        )

    result = convert(text, Script.DEVANAGARI, target)

    if target is Script.LATIN:
        result = capitalize_marked(result)
    if target is Script.MYANMAR:
        result = convert_myanmar_dandas(result)
    else:
        result = convert_dandas(result, DANDA_STYLES.get(target, DEFAULT_STYLE))
    return cleanup_punctuation(result)
