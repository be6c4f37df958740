"""
.. py:module:: unikit.context
   :synopsis: The decoded Unikit tables and the query API.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging

from unikit.category import Name
from unikit.classify import Classifier
from unikit.codec import Decode
from unikit.data import DataSource, DefaultSource, Key
from unikit.errors import ConfigurationError, InvalidCodepoint
from unikit.fold import CaseFolder, FoldResult
from unikit.trie import Trie

logger = logging.getLogger('Unikit')

TRIE_DEPTH = 4


def IsValidCodepoint(cv: int) -> bool:
    """
    ``True`` if *cv* is a Unicode scalar value: in the U+0000..U+10FFFF
    range, but not a surrogate (U+D800..U+DFFF).
    """
    return 0 <= cv <= 0x10FFFF and not 0xD800 <= cv <= 0xDFFF


class Context(object):
    """
    The decoded tables of Unikit, serving :meth:`fold` and :meth:`category`
    queries.

    Contexts are created by :func:`Init` and never change afterwards, so
    they can be shared among threads.

    :param tables: a mapping of every :class:`unikit.data.Key` to its decoded
                   array
    :param handler: the optional error handler ``(location, message)`` that
                    is called before a :exc:`unikit.errors.DataCorruptionError`
                    is raised
    """

    __slots__ = ('tables', '_folder', '_classifier')

    def __init__(self, tables: dict, handler=None):
        self.tables = dict(tables)
        self._folder = CaseFolder(
            Trie(tables[Key.CASE_LOWER], TRIE_DEPTH, handler),
            Trie(tables[Key.CASE_UPPER], TRIE_DEPTH, handler),
            tables[Key.CASE_DATA],
            handler,
        )
        self._classifier = Classifier(
            tables[Key.GCAT_CORE],
            tables[Key.GCAT_BITMAP],
            Trie(tables[Key.GCAT_GEN_LOW], TRIE_DEPTH, handler),
            Trie(tables[Key.GCAT_GEN_HIGH], TRIE_DEPTH, handler),
            tables[Key.GCAT_ASTRAL],
            handler,
        )

    def __repr__(self):
        return 'Context<{}>'.format(', '.join(
            '{}={}'.format(Key.NAMES[key], len(self.tables[key])) for key in Key.ALL
        ))

    valid = staticmethod(IsValidCodepoint)

    def fold(self, cv: int) -> FoldResult:
        """
        Return the full case folding of the codepoint *cv*.

        :raises: InvalidCodepoint If *cv* is not a valid codepoint.
        """
        if not IsValidCodepoint(cv):
            raise InvalidCodepoint(cv)

        return self._folder.fold(cv)

    def category(self, cv: int) -> int:
        """
        Return the :class:`unikit.category.Category` code of any integer
        *cv*; values without a category, including negative ones and
        those beyond U+10FFFF, are ``Cn``.
        """
        return self._classifier.classify(cv)

    def categoryName(self, cv: int) -> str:
        """Return the two-letter category name of *cv*."""
        return Name(self._classifier.classify(cv))

    def casefold(self, text: str) -> str:
        """Return the case folded form of a *text*."""
        return ''.join(chr(cp) for char in text for cp in self.fold(ord(char)).codepoints)


def Init(source: DataSource=None, handler=None) -> Context:
    """
    Decode the eight tables of a data *source* (by default, see
    :func:`unikit.data.DefaultSource`) and return the :class:`Context` that
    serves queries on them.

    :param source: the :class:`unikit.data.DataSource` to fetch tables from
    :param handler: the error handler for table invariant violations
    :raises: ConfigurationError If the source lacks a table.
    :raises: DecodeError If a table is malformed.
    :raises: DataCorruptionError If a decoded table violates an invariant.
    """
    if source is None:
        source = DefaultSource()

    tables = {}

    for key in Key.ALL:
        encoded = source.fetch(key)

        if encoded is None:
            raise ConfigurationError('no %s table in %r' % (Key.NAMES[key], source))

        tables[key] = Decode(encoded)
        logger.debug('decoded %s: %d words', Key.NAMES[key], len(tables[key]))

    return Context(tables, handler)
