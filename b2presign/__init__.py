from .api import (
    presigned_get_url,
    presigned_multipart_put_url,
    presigned_put_url,
    sign_get_url,
    sign_multipart_put_url,
    sign_put_url,
)
from .connection import Connection, SigningIdentity
from .exceptions import (
    HostUnresolvable,
    MalformedInputError,
    PresignError,
    ResolutionError,
    TransportError,
)
from .resolver import region_from_s3_api_url, resolve_endpoint
from .result import SignResult

__title__ = "b2presign"
__version__ = "1.0.0"
__license__ = "MIT"
__all__ = [
    "Connection",
    "SigningIdentity",
    "SignResult",
    "PresignError",
    "MalformedInputError",
    "HostUnresolvable",
    "ResolutionError",
    "TransportError",
    "presigned_get_url",
    "presigned_put_url",
    "presigned_multipart_put_url",
    "sign_get_url",
    "sign_put_url",
    "sign_multipart_put_url",
    "region_from_s3_api_url",
    "resolve_endpoint",
]
