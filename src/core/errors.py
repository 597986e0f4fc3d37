"""Exception taxonomy for patisserie.

Every error is fatal to the invocation. The CLI is the only layer that turns
them into exit codes; everything below it just raises.

Parsing errors also subclass `ValueError` so that the option parser reports
them as usage errors, the same way it reports a malformed integer.
"""

from __future__ import annotations


class PatisserieError(Exception):
    """Base class for every error patisserie reports to the user."""


class InvalidDurationFormatError(PatisserieError, ValueError):
    """The duration string has an unknown unit or no amount."""


class DurationTooLongError(PatisserieError, ValueError):
    """The duration is longer than 100 years."""


class UnknownLanguageError(PatisserieError, ValueError):
    """The language token is neither `autodetect` nor a known identifier."""


class MissingCredentialError(PatisserieError):
    """No API key was given on the command line or in the environment."""


class ContentReadError(PatisserieError):
    """The file (or standard input) could not be read."""


class TransportError(PatisserieError):
    """The HTTP request could not be completed."""


class MalformedResponseError(PatisserieError):
    """The reply body matched neither the success nor the failure shape."""


class RemoteError(PatisserieError):
    """pastery.net rejected the paste; the message is the service's own."""
