import threading
from typing import Callable, Dict

from .codec import ScriptCodec, TableCodec
from .cyrillic import CyrillicCodec
from .devanagari import add_conjunct_joiners
from .myanmar import make_myanmar_codec
from .scripts import Script, UnsupportedScriptPair
from .tables import (
    bengali_table, gujarati_table, gurmukhi_table, kannada_table, khmer_table,
    malayalam_table, sinhala_table, telugu_table,
)
from .thai import ThaiCodec
from .tibetan import TibetanCodec


def _joined(table_factory) -> Callable[[], ScriptCodec]:
    # scripts whose decoded Devanagari gets the open-conjunct joiners
    return lambda: TableCodec(table_factory(), after_decode=[add_conjunct_joiners])


def _plain(table_factory) -> Callable[[], ScriptCodec]:
    return lambda: TableCodec(table_factory())


CODEC_FACTORIES: Dict[Script, Callable[[], ScriptCodec]] = {
    Script.BENGALI: _joined(bengali_table),
    Script.CYRILLIC: CyrillicCodec,
    Script.GUJARATI: _plain(gujarati_table),
    Script.GURMUKHI: _joined(gurmukhi_table),
    Script.KANNADA: _plain(kannada_table),
    Script.KHMER: _plain(khmer_table),
    Script.MALAYALAM: _joined(malayalam_table),
    Script.MYANMAR: make_myanmar_codec,
    Script.SINHALA: _joined(sinhala_table),
    Script.TELUGU: _plain(telugu_table),
    Script.THAI: ThaiCodec,
    Script.TIBETAN: TibetanCodec,
}


_codecs: Dict[Script, ScriptCodec] = {}
_lock = threading.Lock()


def get_codec(script: Script) -> ScriptCodec:
    """Codec for a script reached through Devanagari, built once per process."""
    codec = _codecs.get(script)
    if codec is not None:
        return codec
    with _lock:
        codec = _codecs.get(script)
        if codec is None:
            try:
                factory = CODEC_FACTORIES[script]
            except KeyError:
                raise UnsupportedScriptPair(script, Script.DEVANAGARI) from None
            codec = _codecs[script] = factory()
    return codec
