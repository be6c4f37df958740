"""
.. py:module:: unikit.build
   :synopsis: Compile category and case folding records into the Unikit tables.

All compilers take an iterable of :class:`unikit.ucd.CategoryRecord` (or,
for the case tables, :class:`unikit.ucd.FoldRecord`) instances and return
lists of unsigned 16-bit words.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging

import numpy as np

from unikit.category import Encode
from unikit.codec import Encode as EncodeWords
from unikit.data import Key
from unikit.fold import FoldKey
from unikit.trie import TrieBuilder

logger = logging.getLogger('Build')

#################
# CONFIGURATION #
#################

CORE_LAST = 0xFF
GENERAL_FIRST = 0x100
GENERAL_LAST = 0x1FFFF
ASTRAL_FIRST = 0x20000

BITMAP_VALUES = {'Lo': 1, 'Ll': 2, 'So': 3}
"""
The categories the bitmap covers and their two-bit values.
"""

GENCHAR_EXCLUDED = frozenset({'Lo', 'Ll', 'So', 'Cs', 'Co', 'Cn'})
"""
Categories not stored in the general tries: the bitmap categories, the two
fixed ranges, and the unassigned default.
"""

REMAINDER_CATEGORIES = frozenset({'Cs', 'Co'})

MAX_FOLD_OFFSET = 0x3FFE


##################
# IMPLEMENTATION #
##################
def _Clip(records, first: int, last: int):
    """Yield the parts of the *records* in the *first*..*last* range."""
    for rec in records:
        if rec.ubound < first or rec.lbound > last:
            continue

        yield rec._replace(lbound=max(rec.lbound, first), ubound=min(rec.ubound, last))


def CompileCore(records) -> list:
    """
    Compile the 256 category codes of U+0000..U+00FF.

    :raises: ValueError If any of these codepoints is unassigned or defined
                        twice.
    """
    table = [None] * (CORE_LAST + 1)

    for rec in _Clip(records, 0, CORE_LAST):
        if rec.gencat == 'Cn':
            raise ValueError('unassigned record in core range')

        for cv in range(rec.lbound, rec.ubound + 1):
            if table[cv] is not None:
                raise ValueError('duplicate core definition U+%04X' % cv)

            table[cv] = Encode(rec.gencat)

    if None in table:
        raise ValueError('unassigned core record U+%04X' % table.index(None))

    return table


def CompileBitmap(records) -> list:
    """
    Compile the Lo/Ll/So bitmap for U+0100..U+1FFFF: two bits per codepoint,
    eight codepoints per word, the first codepoint in the least significant
    bits.

    :raises: ValueError If a codepoint is defined twice.
    """
    values = np.zeros(GENERAL_LAST - GENERAL_FIRST + 1, dtype=np.uint16)

    for rec in _Clip(records, GENERAL_FIRST, GENERAL_LAST):
        if rec.gencat not in BITMAP_VALUES:
            continue

        cells = values[rec.lbound - GENERAL_FIRST:rec.ubound - GENERAL_FIRST + 1]

        if cells.any():
            raise ValueError('duplicate bitmap definition in U+%04X..U+%04X' %
                             (rec.lbound, rec.ubound))

        cells[:] = BITMAP_VALUES[rec.gencat]

    shifts = np.arange(0, 16, 2, dtype=np.uint16)
    words = (values.reshape(-1, 8) << shifts).sum(axis=1, dtype=np.uint32)
    return words.astype(np.uint16).tolist()


def CompileGeneral(records) -> tuple:
    """
    Compile the general category tries of U+0100..U+FFFF and
    U+10000..U+1FFFF, covering all categories except :data:`GENCHAR_EXCLUDED`.

    :return: the ``(lower, upper)`` trie tables
    """
    lower = TrieBuilder(4)
    upper = TrieBuilder(4)

    for rec in _Clip(records, GENERAL_FIRST, GENERAL_LAST):
        if rec.gencat in GENCHAR_EXCLUDED:
            continue

        code = Encode(rec.gencat)

        for cv in range(rec.lbound, rec.ubound + 1):
            (lower if cv <= 0xFFFF else upper).add(cv & 0xFFFF, code)

    logger.info('general tries: %d lower and %d upper codepoints', len(lower), len(upper))
    return lower.compile(), upper.compile()


def CompileAstral(records) -> list:
    """
    Compile the astral range table: four words (plane, low offset, high
    offset, category code) per record, sorted, with adjacent ranges of the
    same category merged. Unassigned records are skipped.

    :raises: ValueError If the records are not in ascending order.
    """
    table = []

    for rec in _Clip(records, ASTRAL_FIRST, 0x10FFFF):
        if rec.gencat == 'Cn':
            continue

        code = Encode(rec.gencat)

        for plane in range(rec.lbound >> 16, (rec.ubound >> 16) + 1):
            low = max(rec.lbound, plane << 16) & 0xFFFF
            high = min(rec.ubound, plane << 16 | 0xFFFF) & 0xFFFF

            if table:
                last = table[-1]

                if (last[0], last[2]) >= (plane, low):
                    raise ValueError('astral records out of order at U+%04X' %
                                     (plane << 16 | low))

                if last[0] == plane and last[2] + 1 == low and last[3] == code:
                    last[2] = high
                    continue

            table.append([plane, low, high, code])

    logger.info('astral table: %d ranges', len(table))
    return [word for record in table for word in record]


def CompileRemainder(records) -> list:
    """
    Return the merged ``(first, last, category)`` ranges of the Cs and Co
    codepoints in U+0100..U+1FFFF, which no table covers.
    """
    ranges = []

    for rec in _Clip(records, GENERAL_FIRST, GENERAL_LAST):
        if rec.gencat not in REMAINDER_CATEGORIES:
            continue

        code = Encode(rec.gencat)

        if ranges and ranges[-1][2] == code and ranges[-1][1] + 1 == rec.lbound:
            ranges[-1] = (ranges[-1][0], rec.ubound, code)
        else:
            ranges.append((rec.lbound, rec.ubound, code))

    return ranges


def CompileCase(foldings) -> tuple:
    """
    Compile the case folding tries of U+0000..U+FFFF and U+10000..U+1FFFF
    and their shared data array.

    Both tries map the 16 least significant bits of a codepoint to a packed
    :class:`unikit.fold.FoldKey` into the data array, which stores the 16
    least significant bits of the folded codepoints.

    :return: the ``(lower, upper, data)`` tables
    :raises: ValueError If a mapping leaves the plane of its codepoint or the
                        data array grows too large.
    """
    lower = TrieBuilder(4)
    upper = TrieBuilder(4)
    data = []

    for rec in foldings:
        plane = rec.codepoint >> 16

        if plane > 1:
            raise ValueError('codepoint U+%04X out of range' % rec.codepoint)

        if not 1 <= len(rec.mapping) <= 4:
            raise ValueError('mapping length out of range for U+%04X' % rec.codepoint)

        if any(cv >> 16 != plane for cv in rec.mapping):
            raise ValueError('mapping of U+%04X not in its plane' % rec.codepoint)

        if len(data) > MAX_FOLD_OFFSET:
            raise ValueError('too many codepoint sequences')

        key = FoldKey(len(data), len(rec.mapping))
        data.extend(cv & 0xFFFF for cv in rec.mapping)
        (upper if plane else lower).add(rec.codepoint & 0xFFFF, key.pack())

    if not data:
        raise ValueError('no case foldings')

    logger.info('case tables: %d lower and %d upper foldings, %d data words',
                len(lower), len(upper), len(data))
    return lower.compile(), upper.compile(), data


def CompileTables(records, foldings) -> dict:
    """
    Compile all eight tables from a sequence (not just an iterable) of
    category *records* and an iterable of *foldings*.

    :return: a mapping of :class:`unikit.data.Key` values to word lists
    """
    case_lower, case_upper, case_data = CompileCase(foldings)
    gen_low, gen_high = CompileGeneral(records)
    return {
        Key.CASE_LOWER: case_lower,
        Key.CASE_UPPER: case_upper,
        Key.CASE_DATA: case_data,
        Key.GCAT_CORE: CompileCore(records),
        Key.GCAT_GEN_LOW: gen_low,
        Key.GCAT_GEN_HIGH: gen_high,
        Key.GCAT_BITMAP: CompileBitmap(records),
        Key.GCAT_ASTRAL: CompileAstral(records),
    }


def EncodeTables(tables: dict) -> dict:
    """Encode every word list of a *tables* mapping."""
    return {key: EncodeWords(words) for key, words in tables.items()}
