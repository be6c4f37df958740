"""
.. py:module:: unikit.category
   :synopsis: The 16-bit codes of the Unicode General Categories and their groups.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""


def Encode(name: str) -> int:
    """
    Return the 16-bit code of a two-letter category *name*: the uppercase
    ASCII letter in the most and the lowercase letter in the least
    significant byte.

    :raises: ValueError If *name* is not an uppercase letter followed by a
                        lowercase ASCII letter.
    """
    if len(name) != 2 or not ('A' <= name[0] <= 'Z' and 'a' <= name[1] <= 'z'):
        raise ValueError('category out of range: %r' % name)

    return ord(name[0]) << 8 | ord(name[1])


def Name(code: int) -> str:
    """Return the two-letter name of a category *code*."""
    return chr(code >> 8 & 0xFF) + chr(code & 0xFF)


class Group:
    """
    The seven category groups, as the upper byte of a category code.

    To find the group of a code, AND it with :attr:`.MASK`. The "LC" (cased
    letter) pseudo-group is not a group; see :meth:`Category.cased`.
    """

    MASK = 0xFF00

    L = 0x4C00
    "Letters"
    M = 0x4D00
    "Combining marks"
    N = 0x4E00
    "Numbers"
    P = 0x5000
    "Punctuation"
    S = 0x5300
    "Symbols"
    Z = 0x5A00
    "Separators"
    C = 0x4300
    "Other"


class Category:
    """
    Codes of the 30 Unicode General Categories.

    Every code packs the two ASCII letters of the category name into an
    unsigned 16-bit integer (see :func:`Encode`), so ``Category.Lu`` is
    ``0x4C75``.

    A few class methods help identifying category assignments.
    """

    Lu = 0x4C75
    "``Lu`` - uppercase letter"
    Ll = 0x4C6C
    "``Ll`` - lowercase letter"
    Lt = 0x4C74
    "``Lt`` - titlecase digraph"
    Lm = 0x4C6D
    "``Lm`` - modifier letter"
    Lo = 0x4C6F
    "``Lo`` - other letter"

    Mn = 0x4D6E
    "``Mn`` - nonspacing mark"
    Mc = 0x4D63
    "``Mc`` - spacing mark"
    Me = 0x4D65
    "``Me`` - enclosing mark"

    Nd = 0x4E64
    "``Nd`` - decimal digit"
    Nl = 0x4E6C
    "``Nl`` - letter-like numeric"
    No = 0x4E6F
    "``No`` - other numeric"

    Pc = 0x5063
    "``Pc`` - connector punctuation"
    Pd = 0x5064
    "``Pd`` - dash punctuation"
    Ps = 0x5073
    "``Ps`` - opening punctuation"
    Pe = 0x5065
    "``Pe`` - closing punctuation"
    Pi = 0x5069
    "``Pi`` - initial quotation mark"
    Pf = 0x5066
    "``Pf`` - final quotation mark"
    Po = 0x506F
    "``Po`` - other punctuation"

    Sm = 0x536D
    "``Sm`` - math symbol"
    Sc = 0x5363
    "``Sc`` - currency symbol"
    Sk = 0x536B
    "``Sk`` - modifier symbol"
    So = 0x536F
    "``So`` - other symbol"

    Zs = 0x5A73
    "``Zs`` - space character"
    Zl = 0x5A6C
    "``Zl`` - line separator (only U+2028)"
    Zp = 0x5A70
    "``Zp`` - paragraph separator (only U+2029)"

    Cc = 0x4363
    "``Cc`` - C0/C1 control code"
    Cf = 0x4366
    "``Cf`` - format control code"
    Cs = 0x4373
    "``Cs`` - surrogate codepoint"
    Co = 0x436F
    "``Co`` - private use codepoint"
    Cn = 0x436E
    "``Cn`` - reserved or unassigned"

    CASED = frozenset({Lu, Ll, Lt})

    @classmethod
    def group(cls, code: int) -> int:
        """Return the :class:`Group` of *code*."""
        return code & Group.MASK

    @classmethod
    def cased(cls, code: int) -> bool:
        """``True`` if *code* is a cased letter (Lu, Ll, Lt)."""
        return code in cls.CASED

    @classmethod
    def letter(cls, code: int) -> bool:
        """``True`` if *code* is any letter category (L?)."""
        return code & Group.MASK == Group.L

    @classmethod
    def mark(cls, code: int) -> bool:
        """``True`` if *code* is any mark category (M?)."""
        return code & Group.MASK == Group.M

    @classmethod
    def number(cls, code: int) -> bool:
        """``True`` if *code* is any number category (N?)."""
        return code & Group.MASK == Group.N

    @classmethod
    def punctuation(cls, code: int) -> bool:
        """``True`` if *code* is any punctuation category (P?)."""
        return code & Group.MASK == Group.P

    @classmethod
    def symbol(cls, code: int) -> bool:
        """``True`` if *code* is any symbol category (S?)."""
        return code & Group.MASK == Group.S

    @classmethod
    def separator(cls, code: int) -> bool:
        """``True`` if *code* is any separator category (Z?)."""
        return code & Group.MASK == Group.Z

    @classmethod
    def other(cls, code: int) -> bool:
        """``True`` if *code* is any control, format, or unassigned category (C?)."""
        return code & Group.MASK == Group.C


CATEGORY_MAP = {
    name: getattr(Category, name) for name in (
        'Lu', 'Ll', 'Lt', 'Lm', 'Lo',
        'Mn', 'Mc', 'Me',
        'Nd', 'Nl', 'No',
        'Pc', 'Pd', 'Ps', 'Pe', 'Pi', 'Pf', 'Po',
        'Sm', 'Sc', 'Sk', 'So',
        'Zs', 'Zl', 'Zp',
        'Cc', 'Cf', 'Cs', 'Co', 'Cn',
    )
}
"""
Mapping of Unicode category names to :class:`Category` codes.
"""

CODES = frozenset(CATEGORY_MAP.values())
"""
All valid category codes.
"""
