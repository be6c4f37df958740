"""
.. py:module:: unikit.ucd
   :synopsis: Category and case folding records from the Unicode Character Database.

Records are read either from the ``UnicodeData.txt`` and ``CaseFolding.txt``
files of a UCD release or from the database built into the interpreter.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging
import unicodedata
from collections import namedtuple
from itertools import groupby

MAX_CODEPOINT = 0x10FFFF

CategoryRecord = namedtuple('CategoryRecord', 'lbound ubound gencat')
CategoryRecord.__doc__ = """
The General Category *gencat* (e.g., ``'Lu'``) of the codepoints *lbound*
to *ubound* (inclusive).
"""

FoldRecord = namedtuple('FoldRecord', 'codepoint mapping')
FoldRecord.__doc__ = """
The full case folding *mapping* (a tuple of codepoints) of a *codepoint*.
"""


def _StripComment(line: str) -> str:
    return line.split('#', 1)[0].strip()


def _ParseCodepoint(field: str, lno: int) -> int:
    field = field.strip()

    if not 1 <= len(field) <= 6:
        raise ValueError('invalid codepoint field on line %d' % lno)

    try:
        cv = int(field, 16)
    except ValueError:
        raise ValueError('invalid codepoint field on line %d' % lno)

    if cv > MAX_CODEPOINT:
        raise ValueError('codepoint out of range on line %d' % lno)

    return cv


class UnicodeDataReader(object):
    """
    Iterate the :class:`CategoryRecord` instances of a ``UnicodeData.txt``
    *stream*.

    A ``<..., First>`` line followed by a ``<..., Last>`` line produces a
    single range record; all other lines produce single codepoint records.
    Codepoints must be in ascending order.
    """

    L = logging.getLogger('UnicodeDataReader')

    def __init__(self, stream):
        self.stream = stream

    def __iter__(self):
        position = -1
        first = None

        for lno, line in enumerate(self.stream, 1):
            text = _StripComment(line)

            if not text:
                continue

            fields = text.split(';')

            if len(fields) < 6:
                raise ValueError('invalid record on line %d' % lno)

            cv = _ParseCodepoint(fields[0], lno)
            name = fields[1].strip()
            gencat = fields[2].strip()

            if len(gencat) != 2 or not ('A' <= gencat[0] <= 'Z' and 'a' <= gencat[1] <= 'z'):
                raise ValueError('invalid category on line %d' % lno)

            if cv <= position:
                raise ValueError('codepoint U+%04X out of order on line %d' % (cv, lno))

            position = cv

            if name.startswith('<') and name.lower().endswith('first>'):
                if first is not None:
                    raise ValueError('nested range start on line %d' % lno)

                first = CategoryRecord(cv, cv, gencat)
            elif name.startswith('<') and name.lower().endswith('last>'):
                if first is None or first.gencat != gencat:
                    raise ValueError('unmatched range end on line %d' % lno)

                yield first._replace(ubound=cv)
                first = None
            elif first is not None:
                raise ValueError('unterminated range before line %d' % lno)
            else:
                yield CategoryRecord(cv, cv, gencat)

        if first is not None:
            raise ValueError('unterminated range at end of file')


class CaseFoldingReader(object):
    """
    Iterate the :class:`FoldRecord` instances of a ``CaseFolding.txt``
    *stream*, keeping only the common (``C``) and full (``F``) foldings.
    """

    STATUS = frozenset('CFST')
    FULL = frozenset('CF')

    def __init__(self, stream):
        self.stream = stream

    def __iter__(self):
        for lno, line in enumerate(self.stream, 1):
            text = _StripComment(line)

            if not text:
                continue

            fields = text.split(';')

            if len(fields) != 4 or fields[3].strip():
                raise ValueError('invalid record on line %d' % lno)

            status = fields[1].strip()

            if status not in self.STATUS:
                raise ValueError('invalid folding status on line %d' % lno)

            mapping = tuple(_ParseCodepoint(f, lno) for f in fields[2].split())

            if not 1 <= len(mapping) <= 3:
                raise ValueError('mapping length out of range on line %d' % lno)

            if status in self.FULL:
                yield FoldRecord(_ParseCodepoint(fields[0], lno), mapping)


def InterpreterCategories():
    """
    Yield :class:`CategoryRecord` instances for all assigned codepoints
    (anything but ``Cn``) from the interpreter's database, joining
    consecutive codepoints of the same category.
    """
    cats = ((cv, unicodedata.category(chr(cv))) for cv in range(MAX_CODEPOINT + 1))

    for gencat, run in groupby(cats, key=lambda item: item[1]):
        if gencat == 'Cn':
            continue

        lbound = next(run)[0]
        ubound = lbound

        for ubound, _ in run:
            pass

        yield CategoryRecord(lbound, ubound, gencat)


def InterpreterFoldings(last: int=0x1FFFF):
    """
    Yield :class:`FoldRecord` instances for all codepoints up to *last* that
    :meth:`str.casefold` does not map onto themselves.
    """
    for cv in range(last + 1):
        if 0xD800 <= cv <= 0xDFFF:
            continue

        char = chr(cv)
        folded = char.casefold()

        if folded != char:
            yield FoldRecord(cv, tuple(ord(c) for c in folded))
