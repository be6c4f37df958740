"""
.. py:module:: unikit.classify
   :synopsis: General Category lookup over the compiled category tables.

Each codepoint band is served by a different table:

* U+0000..U+00FF: the core table, one category code per codepoint;
* U+0100..U+1FFFF: the bitmap, which answers Lo, Ll, and So directly,
  followed by the general tries for the lower and upper plane, followed
  by the fixed surrogate and private use ranges;
* U+20000..U+10FFFF: the astral table of sorted, per-plane range records.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from collections import namedtuple

import numpy as np

from unikit.category import Category
from unikit.errors import Abort
from unikit.trie import Trie

CORE_SIZE = 256
BITMAP_START = 0x100
ASTRAL_START = 0x20000
MAX_CODEPOINT = 0x10FFFF

BITMAP_CATEGORIES = (None, Category.Lo, Category.Ll, Category.So)
"""
Categories of the two-bit bitmap values; zero means "not in the bitmap".
"""

FIXED_RANGES = (
    (0xD800, 0xDFFF, Category.Cs),
    (0xE000, 0xF8FF, Category.Co),
)
"""
The only ``(first, last, category)`` ranges below U+20000 that neither the
bitmap nor the general tries cover.
"""


class AstralRange(namedtuple('AstralRange', 'plane low high category')):
    """One astral table record: the codepoints *low*..*high* of a *plane*."""

    __slots__ = ()

    def __contains__(self, cv: int) -> bool:
        return cv >> 16 == self.plane and self.low <= (cv & 0xFFFF) <= self.high


class Classifier(object):
    """
    Classify any integer into a :class:`unikit.category.Category` code.

    :param core: the 256-word core table
    :param bitmap: the two-bits-per-codepoint table from U+0100 on
    :param low: the general :class:`Trie` for U+0000..U+FFFF
    :param high: the general :class:`Trie` for U+10000..U+1FFFF
    :param astral: the flat astral table, four words per record
    :param handler: the error handler for :func:`unikit.errors.Abort`
    """

    def __init__(self, core, bitmap, low: Trie, high: Trie, astral, handler=None):
        if len(core) != CORE_SIZE:
            Abort(handler, 'Invalid core table length')

        if len(astral) < 4 or len(astral) % 4:
            Abort(handler, 'Invalid astral table length')

        self.core = core
        self.bitmap = bitmap
        self.low = low
        self.high = high
        self.ranges = tuple(AstralRange._make(record) for record in
                            np.asarray(astral).reshape(-1, 4).tolist())
        self._handler = handler

    def classify(self, cv: int) -> int:
        """Return the category code of *cv*; ``Cn`` for anything unassigned."""
        if 0 <= cv < BITMAP_START:
            return int(self.core[cv])
        elif BITMAP_START <= cv < ASTRAL_START:
            return self._general(cv)
        elif ASTRAL_START <= cv <= MAX_CODEPOINT:
            return self._astral(cv)
        else:
            return Category.Cn

    def _general(self, cv: int) -> int:
        offset = cv - BITMAP_START
        cell = offset >> 3

        if cell >= len(self.bitmap):
            Abort(self._handler, 'Bitmap query out of range')

        code = BITMAP_CATEGORIES[int(self.bitmap[cell]) >> (offset & 7) * 2 & 0x3]

        if code is not None:
            return code

        if cv <= 0xFFFF:
            code = self.low.query(cv)
        else:
            code = self.high.query(cv & 0xFFFF)

        if code is not None:
            return code

        for first, last, code in FIXED_RANGES:
            if first <= cv <= last:
                return code

        return Category.Cn

    def _astral(self, cv: int) -> int:
        record = self.ranges[self.search(cv)]
        return record.category if cv in record else Category.Cn

    def search(self, cv: int) -> int:
        """
        Return the index of the astral record with the greatest
        ``(plane, low)`` key not above the key of *cv* (or zero if there is
        no such record).

        The midpoint is biased upwards so that an interval of two records
        still shrinks on every step.
        """
        key = (cv >> 16, cv & 0xFFFF)
        ranges = self.ranges
        lower, upper = 0, len(ranges) - 1

        while lower < upper:
            mid = max(lower + 1, lower + (upper - lower) // 2)
            record = ranges[mid]
            probe = (record.plane, record.low)

            if key < probe:
                upper = mid - 1
            elif key > probe:
                lower = mid
            else:
                lower = upper = mid

        return lower
