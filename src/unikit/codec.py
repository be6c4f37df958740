"""
.. py:module:: unikit.codec
   :synopsis: The base-64 wire format of the Unikit tables.

The tables are arrays of unsigned 16-bit words, stored as big-endian bytes
in base-64. Unlike a byte oriented base-64 decoder, :func:`Decode` works on
whole words: every full group of eight characters carries exactly three
words, and a trailing group of four (or of eight, ending in padding)
characters carries one (or two) more.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from base64 import b64encode

import numpy as np

from unikit.errors import AllocationFailure, InvalidCharacter, InvalidLength, InvalidPadding

#################
# CONFIGURATION #
#################

ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'
"""
The 64 digits of the encoding, in value order.
"""

PAD = '='

_DIGITS = np.full(256, -1, dtype=np.int64)
_DIGITS[np.frombuffer(ALPHABET.encode('ascii'), dtype=np.uint8)] = np.arange(64)


##################
# IMPLEMENTATION #
##################
def Decode(encoded: str) -> np.ndarray:
    """
    Decode an *encoded* table string into a read-only array of words.

    The string length must be a positive multiple of four and padding may
    only appear in its last group of four characters. The result has
    ``groups * 3 + extra`` words, where *groups* is the number of full,
    unpadded groups of eight characters and *extra* is one for a trailing
    group of four characters or two for a trailing, padded group of eight.

    :param encoded: The encoded table.
    :return: A read-only ``uint16`` array.
    :raises: InvalidLength, InvalidCharacter, InvalidPadding,
             AllocationFailure
    """
    length = len(encoded)

    if length < 1 or length % 4:
        raise InvalidLength('length %d is not a positive multiple of four' % length)

    groups = length // 8

    # a final group of eight ending in padding is not a full group
    if groups and encoded[groups * 8 - 1] == PAD:
        if length % 8:
            raise InvalidLength('padding before the final group')

        groups -= 1

    base = groups * 8
    extra = (length - base) // 4
    end = base + 3 * extra
    digits = _DIGITS[np.frombuffer(encoded[:end].encode('ascii', 'replace'), dtype=np.uint8)]
    bad = np.flatnonzero(digits < 0)

    if bad.size:
        offset = int(bad[0])
        raise InvalidCharacter('invalid character %r at offset %d' % (encoded[offset], offset))

    if encoded[end:].strip(PAD):
        raise InvalidPadding('non-padding characters after offset %d' % end)

    try:
        words = np.empty(groups * 3 + extra, dtype=np.uint16)
    except MemoryError:
        raise AllocationFailure('cannot allocate %d words' % (groups * 3 + extra))

    if groups:
        rows = digits[:base].reshape(groups, 8)
        acc = np.zeros(groups, dtype=np.int64)

        for column in range(8):
            acc = acc << 6 | rows[:, column]

        words[:groups * 3] = np.stack(
            (acc >> 32, acc >> 16 & 0xFFFF, acc & 0xFFFF), axis=1
        ).ravel().astype(np.uint16)

    if extra:
        value = 0

        for digit in digits[base:end].tolist():
            value = value << 6 | digit

        # drop the bits that only align the last digit
        value >>= 2 * extra

        if extra == 2:
            words[-2] = value >> 16

        words[-1] = value & 0xFFFF

    words.flags.writeable = False
    return words


def Encode(words) -> str:
    """
    Encode a non-empty sequence of 16-bit *words* into a table string that
    :func:`Decode` turns back into the same words.

    :raises: ValueError If *words* is empty or holds values beyond 16 bits.
    """
    values = np.asarray(words, dtype=np.int64)

    if values.ndim != 1 or values.size == 0:
        raise ValueError('need a non-empty sequence of words')

    if values.min() < 0 or values.max() > 0xFFFF:
        raise ValueError('word out of range')

    return b64encode(values.astype('>u2').tobytes()).decode('ascii')
