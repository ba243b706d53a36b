"""Myanmar orthography on top of the plain Myanmar table.

Pali in Myanmar script writes some clusters with dedicated letters: the
great nya, medial ya/ra/wa/ha, great sa and the kinzi form of nga. The tall
aa is used after letters whose round shape would make the short aa ambiguous.
"""

from .codec import TableCodec, replacer
from .devanagari import add_conjunct_joiners
from .tables import myanmar_table

VIRAMA = '္'
ASAT = '်'
AA = 'ာ'
TALL_AA = 'ါ'
E = 'ေ'

# letters written with the tall aa, both for aa and o
TALL_AA_BASES = [
    'ဒ္ဓ',  # ddh
    'ခ',  # kh
    'ဂ',  # g
    'ပ',  # p
    'ဝ',  # v
]

CLUSTER_LETTERS = [
    ('ဉ' + VIRAMA + 'ဉ', 'ည'),  # ñ + ñ
    (VIRAMA + 'ယ', 'ျ'),  # medial ya
    (VIRAMA + 'ရ', 'ြ'),  # medial ra
    (VIRAMA + 'ဝ', 'ွ'),  # medial wa
    (VIRAMA + 'ဟ', 'ှ'),  # medial ha
]

GREAT_SA = ('သ' + VIRAMA + 'သ', 'ဿ')
KINZI = ('င' + VIRAMA, 'င' + ASAT + VIRAMA)


def _tall_aa_pairs():
    pairs = []
    for base in TALL_AA_BASES:
        pairs.append((base + E + AA, base + E + TALL_AA))
        pairs.append((base + AA, base + TALL_AA))
    return pairs


def make_myanmar_codec() -> TableCodec:
    encode_rules = CLUSTER_LETTERS + _tall_aa_pairs() + [GREAT_SA, KINZI]
    decode_rules = [
        (KINZI[1], KINZI[0]),
        (GREAT_SA[1], GREAT_SA[0]),
        (TALL_AA, AA),
    ] + [(new, old) for old, new in reversed(CLUSTER_LETTERS)]
    return TableCodec(
        myanmar_table(),
        before_decode=[replacer(decode_rules)],
        after_decode=[add_conjunct_joiners],
        after_encode=[replacer(encode_rules)],
    )


def fold_tall_aa(text: str) -> str:
    """Collapse the two encodings of aa for comparison."""
    return text.replace(TALL_AA, AA)
