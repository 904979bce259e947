"""
b2presign.operations
~~~~~~~~~~~~~~~~~~~~

Base class for presigned URL requests.
"""

from ..datetime_utils import amz_date, to_utc
from ..signatures.v4 import ALGORITHM, SIGNED_HEADERS, UNSIGNED_PAYLOAD
from ..util import encode_query, uri_encode


class PresignRequest(object):
    """
    Base class for all presigned URL requests.

    Handles the common work every presigned URL needs: the virtual-host
    style object URL and the ``X-Amz-*`` query parameters, emitted in the
    order the object store lists them.

    Subclasses set ``method`` and ``operation`` (the ``x-id`` value) and may
    add parameters through ``extra_params``.

    Args:
        conn: The connection holding the signer, endpoint and identity
        key (str): Object key, not URL-encoded
        bucket (str): Bucket name
        expires (int): Lifetime of the URL in seconds
        timestamp (datetime, optional): Signing instant, defaults to now
    """

    method = None
    operation = None

    def __init__(self, conn, key, bucket, expires, timestamp=None):
        self.signer = conn.signer
        self.tls = conn.tls
        self.endpoint = conn.endpoint
        self.key = key
        self.bucket = bucket
        self.expires = expires
        self.timestamp = to_utc(timestamp)

    def bucket_url(self, key, bucket):
        """
        Generate the unsigned object URL.

        Examples:
            >>> request.bucket_url('my-file.txt', 'my-bucket')
            'https://my-bucket.s3.us-west-002.backblazeb2.com/my-file.txt'
        """
        protocol = "https" if self.tls else "http"
        return "{0}://{1}.{2}/{3}".format(
            protocol, bucket, self.endpoint, uri_encode(key, encode_slash=False)
        )

    def extra_params(self):
        """Parameters placed between ``X-Amz-SignedHeaders`` and ``x-id``."""
        return []

    def query_params(self):
        """
        Build the ordered query parameters, signature excluded.

        Returns:
            list: ``(name, value)`` pairs
        """
        params = [
            ("X-Amz-Algorithm", ALGORITHM),
            ("X-Amz-Content-Sha256", UNSIGNED_PAYLOAD),
            ("X-Amz-Credential", self.signer.credential(self.timestamp)),
            ("X-Amz-Date", amz_date(self.timestamp)),
            ("X-Amz-Expires", str(self.expires)),
            ("X-Amz-Security-Token", self.signer.session_token),
            ("X-Amz-SignedHeaders", SIGNED_HEADERS),
        ]
        params.extend(self.extra_params())
        params.append(("x-id", self.operation))
        return params

    def unsigned_url(self):
        return "{0}?{1}".format(
            self.bucket_url(self.key, self.bucket), encode_query(self.query_params())
        )

    def run(self):
        """
        Sign the request.

        Returns:
            str: Presigned URL

        Raises:
            HostUnresolvable: If the URL has no usable host
        """
        return self.signer.presign(
            self.method, self.key, self.unsigned_url(), self.timestamp
        )
