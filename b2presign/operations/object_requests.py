"""
b2presign.operations.object_requests
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Presigned URLs for single-object download and upload.
"""

from . import PresignRequest


class PresignedGetRequest(PresignRequest):
    """Presign a download of an object."""

    method = "GET"
    operation = "GetObject"


class PresignedPutRequest(PresignRequest):
    """Presign an upload of a whole object in one request."""

    method = "PUT"
    operation = "PutObject"
