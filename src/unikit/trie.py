"""
.. py:module:: unikit.trie
   :synopsis: Fixed-depth, sixteen-way tries compiled to flat arrays of words.

A compiled trie is a sequence of nodes of sixteen words each; the root is
the first node. A key is consumed one nybble per level, most significant
nybble first. On every level but the last, the selected word is the index
of the next node; on the last level, it is the mapped value. The word
:data:`ABSENT` marks an empty slot on any level.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from unikit.errors import Abort

ABSENT = 0xFFFF
"""
The empty slot marker; never a mapped value.
"""

FANOUT = 16


class Trie(object):
    """
    Query accessor over a compiled trie *table* of a given *depth* (number
    of key nybbles, 1 to 8).

    The table length is validated once, on construction; a table that is not
    a positive multiple of sixteen words, or a lookup that runs past its
    end, is reported through the *handler* (see :func:`unikit.errors.Abort`).
    """

    __slots__ = ('table', 'depth', '_handler')

    def __init__(self, table, depth: int, handler=None):
        if not 1 <= depth <= 8:
            raise ValueError('depth %r out of range' % depth)

        if len(table) < FANOUT or len(table) % FANOUT:
            Abort(handler, 'Invalid trie length')

        self.table = table
        self.depth = depth
        self._handler = handler

    def __len__(self):
        return len(self.table)

    def __repr__(self):
        return 'Trie<depth={}, nodes={}>'.format(self.depth, len(self.table) // FANOUT)

    def query(self, key: int):
        """
        Return the value mapped to *key* or ``None`` if it is absent.

        Only the :attr:`depth` least significant nybbles of *key* are used.
        """
        table = self.table
        size = len(table)
        offset = 0

        for shift in range(4 * (self.depth - 1), 0, -4):
            index = offset + (key >> shift & 0xF)

            if index >= size:
                Abort(self._handler, 'Trie bound error')

            node = int(table[index])

            if node == ABSENT:
                return None

            offset = node * FANOUT

        index = offset + (key & 0xF)

        if index >= size:
            Abort(self._handler, 'Trie bound error')

        value = int(table[index])
        return None if value == ABSENT else value


class TrieBuilder(object):
    """
    Collects key/value mappings and compiles them into a trie table.

    Nodes are lists of sixteen slots: child nodes on the inner levels,
    values on the last level, and ``None`` where empty.
    """

    def __init__(self, depth: int):
        if not 1 <= depth <= 8:
            raise ValueError('depth %r out of range' % depth)

        self.depth = depth
        self.root = [None] * FANOUT
        self.size = 0

    def __len__(self):
        return self.size

    def add(self, key: int, value: int):
        """
        Map the *key* (using its :attr:`depth` least significant nybbles) to
        *value*.

        :raises: ValueError If *value* is out of the 0..0xFFFE range or the
                            *key* already is mapped.
        """
        if not 0 <= value < ABSENT:
            raise ValueError('value %r out of range' % value)

        node = self.root

        for shift in range(4 * (self.depth - 1), 0, -4):
            nybble = key >> shift & 0xF

            if node[nybble] is None:
                node[nybble] = [None] * FANOUT

            node = node[nybble]

        if node[key & 0xF] is not None:
            raise ValueError('key %#x already defined' % key)

        node[key & 0xF] = value
        self.size += 1

    def compile(self) -> list:
        """
        Return the compiled table, a non-empty list of words with a length
        that is a multiple of sixteen.

        Node indices are assigned depth-first, in pre-order, starting with
        zero for the root.
        """
        ids = {}
        order = []

        def assign(node):
            if len(order) >= ABSENT:
                raise ValueError('too many nodes in 16-bit trie')

            ids[id(node)] = len(order)
            order.append(node)

            for slot in node:
                if isinstance(slot, list):
                    assign(slot)

        assign(self.root)
        table = [ABSENT] * (len(order) * FANOUT)

        for idx, node in enumerate(order):
            for nybble, slot in enumerate(node):
                if isinstance(slot, list):
                    table[idx * FANOUT + nybble] = ids[id(slot)]
                elif slot is not None:
                    table[idx * FANOUT + nybble] = slot

        return table
