import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from indic_transliteration import sanscript

from paliscript.conversion.converter import convert
from paliscript.conversion.scripts import Script

logger = logging.getLogger(__name__)

# indic_transliteration scheme names for the scripts both libraries know
SANSCRIPT_SCHEMES: Dict[Script, str] = {
    Script.BENGALI: sanscript.BENGALI,
    Script.DEVANAGARI: sanscript.DEVANAGARI,
    Script.GUJARATI: sanscript.GUJARATI,
    Script.GURMUKHI: sanscript.GURMUKHI,
    Script.KANNADA: sanscript.KANNADA,
    Script.LATIN: sanscript.IAST,
    Script.MALAYALAM: sanscript.MALAYALAM,
    Script.TELUGU: sanscript.TELUGU,
    Script.SINHALA: 'sinhala',
    Script.TIBETAN: 'tibetan',
    Script.THAI: 'thai',
}


class ReferenceUnavailable(LookupError):
    """indic_transliteration has no scheme for the script."""

    def __init__(self, script: Script):
        self.script = script
        super().__init__(f"No reference transliteration for {script.value}")


@dataclass
class ReferenceComparison:
    word: str
    script: Script
    ours: str
    reference: str

    @property
    def agrees(self) -> bool:
        return self.ours == self.reference


class SanscriptReference:
    """Compare this converter's output with indic_transliteration's.

    The two libraries follow different conventions for some letters (e.g.
    Latin ``ṃ`` against IAST ``ṁ`` in older schemes), so a disagreement is a
    prompt for a closer look, not a verdict.
    """

    def __init__(self):
        self.schemes = {
            script: scheme for script, scheme in SANSCRIPT_SCHEMES.items()
            if scheme in sanscript.SCHEMES
        }

    @property
    def scripts(self) -> List[Script]:
        return [script for script in self.schemes if script is not Script.DEVANAGARI]

    def transliterate(self, word: str, script: Script) -> str:
        scheme = self.schemes.get(script)
        if scheme is None:
            raise ReferenceUnavailable(script)
        return sanscript.transliterate(word, sanscript.DEVANAGARI, scheme)

    def compare(self, word: str, script: Script) -> ReferenceComparison:
        reference = self.transliterate(word, script)
        ours = convert(word, Script.DEVANAGARI, script)
        result = ReferenceComparison(word, script, ours, reference)
        if not result.agrees:
            logger.debug("%s/%s: %r vs reference %r", word, script.value, ours, reference)
        return result

    def compare_all(self, word: str,
                    scripts: Optional[Iterable[Script]] = None) -> List[ReferenceComparison]:
        scripts = self.scripts if scripts is None else [s for s in scripts if s in self.schemes]
        return [self.compare(word, script) for script in scripts]
