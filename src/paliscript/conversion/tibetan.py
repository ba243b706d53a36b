from typing import List, Optional

from .codec import TableCodec, replacer
from .devanagari import VIRAMA, ZWJ, ZWNJ, is_consonant
from .tables import subjoined, tibetan_table

HALANT = '྄'
TSHEG = '་'

# clusters written with an explicit halant instead of a subjoined letter
HALANT_CLUSTERS = {
    ('ज', 'झ'),  # j + jh
    ('य', 'ह'),  # y + h
    ('व', 'ह'),  # v + h
}

# fixed-form subjoined letters and their regular forms
FIXED_FORMS = [
    ('ྻ', 'ྱ'),  # ya
    ('ྺ', 'ྭ'),  # wa
    ('ྼ', 'ྲ'),  # ra
]


class TibetanCodec(TableCodec):
    """Tibetan stacks clusters vertically with subjoined letters.

    A consonant that follows a virama is written in its subjoined form and
    the virama disappears; a virama with no consonant after it stays visible
    as a halant.
    """

    def __init__(self):
        super().__init__(
            tibetan_table(),
            before_decode=[replacer(FIXED_FORMS + [(TSHEG, '')])],
        )

    def from_devanagari(self, text: str) -> str:
        mapping = self.table.from_devanagari
        out: List[str] = []
        previous: Optional[str] = None
        pending_virama = False
        for char in text:
            if char in (ZWJ, ZWNJ):
                continue
            if char == VIRAMA and previous is not None:
                pending_virama = True
                continue
            if is_consonant(char) and char in mapping:
                native = mapping[char]
                if pending_virama:
                    if (previous, char) in HALANT_CLUSTERS:
                        native = HALANT + native
                    else:
                        native = subjoined(native)
                out.append(native)
                previous = char
                pending_virama = False
                continue
            if pending_virama:
                out.append(HALANT)
                pending_virama = False
            previous = None
            out.append(mapping.get(char, char))
        if pending_virama:
            out.append(HALANT)
        return ''.join(out)
