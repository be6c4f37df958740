"""
.. py:module:: unikit.errors
   :synopsis: Exceptions raised by Unikit and the invariant violation abort path.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging
import os
import sys

logger = logging.getLogger('Unikit')


class UnikitError(Exception):
    """Base class of all errors raised by this library."""


class DecodeError(UnikitError, ValueError):
    """A malformed encoded table string."""


class InvalidLength(DecodeError):
    """The encoded string has an impossible length or misplaced padding."""


class InvalidCharacter(DecodeError):
    """The encoded string contains a character outside the alphabet."""


class InvalidPadding(DecodeError):
    """Non-``=`` characters follow the encoded data."""


class AllocationFailure(DecodeError):
    """The decoded array could not be allocated."""


class ConfigurationError(UnikitError):
    """A data source does not provide one of the required tables."""


class UsageError(UnikitError):
    """The caller violated the contract of a query."""


class InvalidCodepoint(UsageError, ValueError):
    """The value is not a Unicode scalar value (see :func:`IsValidCodepoint`)."""

    def __init__(self, cv):
        super(InvalidCodepoint, self).__init__('invalid codepoint: %r' % (cv,))
        self.codepoint = cv


class DataCorruptionError(UnikitError):
    """
    An internal table invariant is violated.

    This never results from caller input; it signals defective tables (or a
    defective decoder) and must not be handled as an ordinary condition.
    """

    def __init__(self, location: str, message: str=None):
        super(DataCorruptionError, self).__init__(
            '[Unikit error, %s] %s' % (location, message or 'Generic error')
        )
        self.location = location
        self.detail = message


def DefaultHandler(location: str, message: str=None):
    """Write the diagnostic to the log; :func:`Abort` terminates afterwards."""
    logger.critical('[Unikit error, %s] %s', location, message or 'Generic error')


def Abort(handler, message: str=None):
    """
    Report an invariant violation and never return.

    The *handler* (or :func:`DefaultHandler` if ``None``) receives the
    ``file:line`` location of the caller and the optional *message*. Should
    the handler return, a :exc:`DataCorruptionError` is raised anyway.

    :raises: DataCorruptionError always
    """
    frame = sys._getframe(1)
    location = '%s:%d' % (os.path.basename(frame.f_code.co_filename), frame.f_lineno)
    (handler or DefaultHandler)(location, message)
    raise DataCorruptionError(location, message)
