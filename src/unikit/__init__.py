"""
.. py:module:: unikit
   :synopsis: Unicode case folding and General Category lookups from compact tables.

Usage::

    >>> from unikit import Init, Category
    >>> uk = Init()
    >>> uk.category(0x41) == Category.Lu
    True
    >>> uk.fold(0x4D)
    FoldResult(codepoints=(109,), trivial=False)

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from unikit.category import CATEGORY_MAP, Category, Group
from unikit.context import Context, Init, IsValidCodepoint
from unikit.errors import DataCorruptionError, DecodeError, InvalidCodepoint, UnikitError
from unikit.fold import FoldResult

__version__ = '1.0.0'
