"""
.. py:module:: unikit.data
   :synopsis: Sources of the eight encoded Unikit tables.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging
import os

#################
# CONFIGURATION #
#################

TABLES_ENV = 'UNIKIT_TABLES'
"""
Environment variable naming a tables file for :func:`DefaultSource`.
"""

LITERAL_WIDTH = 64
"""
Maximum number of encoded characters per literal line in a tables file.
"""


class Key:
    """The data keys of the eight tables."""

    CASE_LOWER = 100
    "case folding trie, U+0000..U+FFFF"
    CASE_UPPER = 101
    "case folding trie, U+10000..U+1FFFF"
    CASE_DATA = 102
    "case folding codepoint sequences"

    GCAT_CORE = 200
    "category codes of U+0000..U+00FF"
    GCAT_GEN_LOW = 201
    "general category trie, U+0000..U+FFFF"
    GCAT_GEN_HIGH = 202
    "general category trie, U+10000..U+1FFFF"
    GCAT_BITMAP = 203
    "Lo/Ll/So bitmap from U+0100 to U+1FFFF"
    GCAT_ASTRAL = 204
    "category ranges from U+20000 on"

    NAMES = {
        CASE_LOWER: 'case-lower',
        CASE_UPPER: 'case-upper',
        CASE_DATA: 'case-data',
        GCAT_CORE: 'gcat-core',
        GCAT_GEN_LOW: 'gcat-gen-low',
        GCAT_GEN_HIGH: 'gcat-gen-high',
        GCAT_BITMAP: 'gcat-bitmap',
        GCAT_ASTRAL: 'gcat-astral',
    }

    ALL = tuple(sorted(NAMES))

    @classmethod
    def byName(cls, name: str) -> int:
        """Return the key of a table *name*; raises :exc:`KeyError` if unknown."""
        for key, known in cls.NAMES.items():
            if known == name:
                return key

        raise KeyError(name)


##################
# IMPLEMENTATION #
##################
class DataSource(object):
    """
    Abstract provider of encoded tables.
    """

    def fetch(self, key: int):
        """
        Return the encoded table for a :class:`Key` or ``None`` if the key is
        not recognized.
        """
        raise NotImplementedError("abstract")


class DictSource(DataSource):
    """Serve tables from a mapping of keys to encoded strings."""

    def __init__(self, tables: dict):
        self.tables = dict(tables)

    def fetch(self, key: int):
        return self.tables.get(key)


class FileSource(DictSource):
    """
    Serve tables from a tables file.

    A tables file names each table on a line of its own, followed by
    indented lines with double-quoted chunks of the encoded table::

        # comment
        gcat-core
          "<up to 64 encoded characters>"
          ...
    """

    L = logging.getLogger('FileSource')

    def __init__(self, path: str, encoding: str='ascii'):
        with open(path, encoding=encoding) as stream:
            tables = ReadTables(stream)

        self.L.debug('read %d tables from %s', len(tables), path)
        super(FileSource, self).__init__(tables)


class UnicodeDataSource(DataSource):
    """
    Compile and encode the tables from category and case folding records on
    first use; by default, the records come from the interpreter's Unicode
    Character Database (:mod:`unicodedata`).

    :param categories: a callable returning an iterable of
                       :class:`unikit.ucd.CategoryRecord`
    :param foldings: a callable returning an iterable of
                     :class:`unikit.ucd.FoldRecord`
    """

    def __init__(self, categories=None, foldings=None):
        from unikit import ucd

        self.categories = categories or ucd.InterpreterCategories
        self.foldings = foldings or ucd.InterpreterFoldings
        self._tables = None

    def fetch(self, key: int):
        if self._tables is None:
            from unikit.build import CompileTables, EncodeTables

            compiled = CompileTables(list(self.categories()), self.foldings())
            self._tables = EncodeTables(compiled)

        return self._tables.get(key)


def DefaultSource() -> DataSource:
    """
    Return a :class:`FileSource` for the file named by the ``UNIKIT_TABLES``
    environment variable, or a :class:`UnicodeDataSource` if it is not set.
    """
    path = os.getenv(TABLES_ENV)
    return FileSource(path) if path else UnicodeDataSource()


def ReadTables(stream) -> dict:
    """
    Parse a tables file *stream* into a mapping of keys to encoded strings.

    :raises: ValueError If the file is malformed or names an unknown table.
    """
    tables = {}
    chunks = None

    for lno, line in enumerate(stream, 1):
        text = line.strip()

        if not text or text.startswith('#'):
            continue

        if not line[0].isspace():
            try:
                key = Key.byName(text)
            except KeyError:
                raise ValueError('unknown table %r on line %d' % (text, lno))

            if key in tables:
                raise ValueError('duplicate table %r on line %d' % (text, lno))

            chunks = []
            tables[key] = chunks
        elif chunks is None:
            raise ValueError('data before the first table name on line %d' % lno)
        elif len(text) < 2 or text[0] != '"' or text[-1] != '"':
            raise ValueError('malformed literal on line %d' % lno)
        else:
            chunks.append(text[1:-1])

    return {key: ''.join(parts) for key, parts in tables.items()}


def WriteTables(stream, tables: dict):
    """Write a mapping of keys to encoded strings as a tables file."""
    stream.write('# Unikit tables\n')

    for key in Key.ALL:
        if key not in tables:
            continue

        encoded = tables[key]
        stream.write('%s\n' % Key.NAMES[key])

        for start in range(0, len(encoded), LITERAL_WIDTH):
            stream.write('  "%s"\n' % encoded[start:start + LITERAL_WIDTH])
