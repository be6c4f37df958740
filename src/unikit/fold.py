"""
.. py:module:: unikit.fold
   :synopsis: Full Unicode case folding over the compiled case tables.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from collections import namedtuple

from unikit.errors import Abort
from unikit.trie import Trie

UPPER_PLANE = 0x10000


class FoldResult(namedtuple('FoldResult', 'codepoints trivial')):
    """
    The case folding of a codepoint: a tuple of one to four *codepoints*
    and a flag that is ``True`` if the folding is the codepoint itself.
    """

    __slots__ = ()

    def __str__(self):
        return ' '.join('U+%04X' % cv for cv in self.codepoints)


class FoldKey(namedtuple('FoldKey', 'offset length')):
    """
    A case data array reference: *length* codepoints (1 to 4) starting at
    *offset*.
    """

    __slots__ = ()

    @classmethod
    def unpack(cls, value: int):
        """Split a trie value: the low two bits are ``length - 1``, the rest the offset."""
        return cls(value >> 2, (value & 0x3) + 1)

    def pack(self) -> int:
        return self.offset << 2 | self.length - 1


class CaseFolder(object):
    """
    Folding lookups for the lower (U+0000..U+FFFF) and upper
    (U+10000..U+1FFFF) planes; no other plane has case foldings.

    Both tries are keyed with the 16 least significant bits of a codepoint
    and map to a :class:`FoldKey` into the shared *data* array, which holds
    those 16 bits of every folded codepoint.
    """

    def __init__(self, lower: Trie, upper: Trie, data, handler=None):
        self.lower = lower
        self.upper = upper
        self.data = data
        self._handler = handler

    def fold(self, cv: int) -> FoldResult:
        """
        Return the :class:`FoldResult` of a valid codepoint *cv*.

        The caller is responsible for rejecting invalid codepoints.
        """
        if cv <= 0xFFFF:
            trie, base = self.lower, 0
        elif cv <= 0x1FFFF:
            trie, base = self.upper, UPPER_PLANE
        else:
            return FoldResult((cv,), True)

        value = trie.query(cv & 0xFFFF)

        if value is None:
            return FoldResult((cv,), True)

        key = FoldKey.unpack(value)

        if key.offset + key.length > len(self.data):
            Abort(self._handler, 'Data bound error')

        codepoints = tuple(
            base + int(cp) for cp in self.data[key.offset:key.offset + key.length]
        )
        return FoldResult(codepoints, codepoints == (cv,))
