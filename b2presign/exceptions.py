"""
b2presign.exceptions
~~~~~~~~~~~~~~~~~~~~

Error taxonomy for endpoint resolution and URL signing.
"""


class PresignError(Exception):
    """Base class for every error raised by b2presign."""


class MalformedInputError(PresignError, ValueError):
    """A sign request carried an argument the engine cannot use."""


class HostUnresolvable(MalformedInputError):
    """The URL to be signed has no parseable host."""

    def __init__(self, url):
        super(HostUnresolvable, self).__init__(
            "Unable to determine host of {0!r}".format(url)
        )
        self.url = url


class ResolutionError(PresignError):
    """The S3-compatible endpoint or region could not be resolved."""


class TransportError(ResolutionError):
    """The authorization call failed at the HTTP level."""
