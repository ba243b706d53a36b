from typing import Callable, Dict, List, Optional, Tuple

from .scripts import Script


class CharacterTable:
    """Two-way mapping between one script and Devanagari.

    ``from_devanagari`` maps a single Devanagari code point to a script string
    (possibly empty, possibly several code points). The reverse direction is
    derived from it: each non-empty script string maps back to its Devanagari
    character, the first entry winning when two characters share a spelling.
    ``aliases`` adds input-only spellings (decomposed vowels, variant signs)
    that are accepted but never produced. ``output_only`` spellings are
    produced but never read back.
    """

    def __init__(self, script: Script, from_devanagari: Dict[str, str],
                 aliases: Optional[Dict[str, str]] = None,
                 output_only: Optional[Dict[str, str]] = None):
        self.script = script
        self.from_devanagari = dict(from_devanagari)
        self.output_only = dict(output_only or {})

        self.single: Dict[str, str] = {}
        self.multi: Dict[str, str] = {}
        for deva, native in self.from_devanagari.items():
            if not native:
                continue
            self._add_reverse(native, deva)
        for native, deva in (aliases or {}).items():
            self._add_reverse(native, deva, override=True)

        self.max_length = max([len(k) for k in self.multi] + [1])
        self.from_devanagari.update(self.output_only)

    def _add_reverse(self, native: str, deva: str, override: bool = False):
        target = self.single if len(native) == 1 else self.multi
        if override or native not in target:
            target[native] = deva

    def match(self, text: str, pos: int) -> Optional[Tuple[str, int]]:
        """Longest script substring at ``pos`` with a Devanagari reading."""
        for length in range(min(self.max_length, len(text) - pos), 1, -1):
            chunk = text[pos:pos + length]
            if chunk in self.multi:
                return self.multi[chunk], length
        char = text[pos]
        if char in self.single:
            return self.single[char], 1
        return None

    def inverse_errors(self) -> List[str]:
        """Entries whose script spelling does not read back to the same character."""
        errors = []
        for deva, native in self.from_devanagari.items():
            if not native or deva in self.output_only:
                continue
            found = self.match(native, 0)
            if found is None or found[0] != deva or found[1] != len(native):
                errors.append(f"U+{ord(deva):04X} -> {native!r} -> {found!r}")
        return errors


class ScriptCodec:
    """Converts one script to and from Devanagari."""

    script = Script.UNKNOWN

    def to_devanagari(self, text: str) -> str:
        raise NotImplementedError

    def from_devanagari(self, text: str) -> str:
        raise NotImplementedError


class TableCodec(ScriptCodec):
    """Codec for scripts with an explicit virama and distinct vowel signs.

    Devanagari to script is a character substitution. Script to Devanagari is
    a longest-match scan over the table followed by optional rewrite passes.
    """

    def __init__(self, table: CharacterTable,
                 before_decode: Optional[List[Callable[[str], str]]] = None,
                 after_decode: Optional[List[Callable[[str], str]]] = None,
                 after_encode: Optional[List[Callable[[str], str]]] = None):
        self.table = table
        self.script = table.script
        self.before_decode = before_decode or []
        self.after_decode = after_decode or []
        self.after_encode = after_encode or []

    def from_devanagari(self, text: str) -> str:
        table = self.table.from_devanagari
        out = ''.join(table.get(char, char) for char in text)
        for rule in self.after_encode:
            out = rule(out)
        return out

    def to_devanagari(self, text: str) -> str:
        for rule in self.before_decode:
            text = rule(text)
        out = []
        i = 0
        while i < len(text):
            found = self.table.match(text, i)
            if found is None:
                out.append(text[i])
                i += 1
            else:
                out.append(found[0])
                i += found[1]
        result = ''.join(out)
        for rule in self.after_decode:
            result = rule(result)
        return result


def replacer(pairs: List[Tuple[str, str]]) -> Callable[[str], str]:
    """Build a rewrite pass applying ``str.replace`` for each pair in order."""
    def rewrite(text: str) -> str:
        for old, new in pairs:
            text = text.replace(old, new)
        return text
    return rewrite
