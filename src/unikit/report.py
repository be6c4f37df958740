"""
.. py:module:: unikit.report
   :synopsis: Parsing and formatting helpers for the Unikit command-line tools.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from unidecode import unidecode

from unikit.category import Category, Encode, Name
from unikit.codec import Encode as EncodeWords

MAX_CODEPOINT = 0x10FFFF
HEXDIGITS = frozenset('0123456789abcdefABCDEF')
WORDS_PER_LINE = 8
WORDS_PER_LITERAL = 24


def ParseCodepoint(text: str) -> int:
    """
    Parse a codepoint in ``U+004D`` notation: ``U+`` (or ``u+``) followed
    by one to six hexadecimal digits, without any whitespace.

    :raises: ValueError If *text* is malformed or beyond U+10FFFF.
    """
    if len(text) < 3 or text[0] not in 'Uu' or text[1] != '+':
        raise ValueError('invalid codepoint parameter %r' % text)

    digits = text[2:]

    if len(digits) > 6 or not HEXDIGITS.issuperset(digits):
        raise ValueError('invalid codepoint parameter %r' % text)

    cv = int(digits, 16)

    if cv > MAX_CODEPOINT:
        raise ValueError('codepoint parameter %r out of range' % text)

    return cv


def ParseCategory(text: str) -> int:
    """
    Parse a two-letter category name (an uppercase followed by a lowercase
    ASCII letter) into its code.

    :raises: ValueError If *text* is malformed.
    """
    try:
        return Encode(text)
    except ValueError:
        raise ValueError('invalid category parameter %r' % text)


def FormatCodepoint(cv: int) -> str:
    return 'U+%04X' % cv


def Transliterate(cv: int, code: int) -> str:
    """
    Return an ASCII rendition of the character *cv* of category *code*, or an
    empty string if it has none (control, format, unassigned, etc.).
    """
    if Category.other(code) or Category.separator(code):
        return ''

    return unidecode(chr(cv)).strip()


def CategoryRuns(context, first: int=0, last: int=MAX_CODEPOINT):
    """
    Yield the maximal ``(lbound, ubound, code)`` runs of codepoints with the
    same category from *first* to *last* (inclusive).
    """
    category = context.category
    start = first
    current = category(first)

    for cv in range(first + 1, last + 1):
        code = category(cv)

        if code != current:
            yield start, cv - 1, current
            start, current = cv, code

    yield start, last, current


def FormatRun(lbound: int, ubound: int, code: int) -> str:
    return '[%s] %s - %s' % (Name(code), FormatCodepoint(lbound), FormatCodepoint(ubound))


def FormatPretty(words) -> str:
    """
    Format an array of words in lines of eight, each line starting with the
    offset of its first word::

        0000: 0x4363, 0x4363, ...
    """
    lines = []

    for base in range(0, len(words), WORDS_PER_LINE):
        lines.append('%04x: %s' % (base, ', '.join(
            '0x%04x' % w for w in words[base:base + WORDS_PER_LINE]
        )))

    return ',\n'.join(lines) + '\n'


def FormatLiteral(words) -> str:
    """
    Format an array of words as lines of double-quoted, encoded literals
    that concatenate into the complete encoded table.
    """
    return ''.join(
        '  "%s"\n' % EncodeWords(words[base:base + WORDS_PER_LITERAL])
        for base in range(0, len(words), WORDS_PER_LITERAL)
    )
