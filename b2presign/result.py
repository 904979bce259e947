"""
b2presign.result
~~~~~~~~~~~~~~~~

Tagged outcome of a signing call.
"""

from collections import namedtuple

OK = "ok"
RESOLUTION_FAILED = "resolution_failed"
MALFORMED_INPUT = "malformed_input"
TRANSPORT_ERROR = "transport_error"


class SignResult(namedtuple("SignResult", ["status", "value", "error"])):
    """
    Outcome of a signing call.

    ``value`` is the URL (or list of URLs) when ``status`` is ``OK`` and
    None otherwise; ``error`` holds the exception that caused a failure.
    """

    __slots__ = ()

    @classmethod
    def success(cls, value):
        return cls(OK, value, None)

    @classmethod
    def failure(cls, status, error):
        return cls(status, None, error)

    @property
    def ok(self):
        return self.status == OK

    def unwrap_or(self, default):
        return self.value if self.ok else default
