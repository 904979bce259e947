"""
b2presign.signatures
~~~~~~~~~~~~~~~~~~~~

Presigned URL signature implementations.
Only the unsigned-payload SigV4 query-string variant is supported.
"""

from .base import BaseSignature
from .v4 import SignatureV4

__all__ = ["BaseSignature", "SignatureV4"]
