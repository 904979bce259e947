"""
b2presign.connection
~~~~~~~~~~~~~~~~~~~~

Signing engine bound to one resolved account identity.
"""

import re
from collections import namedtuple

from .exceptions import MalformedInputError
from .operations.multipart_requests import PresignedMultipartUploadRequest
from .operations.object_requests import PresignedGetRequest, PresignedPutRequest
from .resolver import B2_AUTHORIZE_URL, DEFAULT_TIMEOUT, AuthorizeAccountRequest
from .signatures.v4 import SignatureV4

MAX_EXPIRES = 2 ** 32 - 1
DEFAULT_EXPIRES = 3600

# Characters allowed in a bucket name that lands in the URL host
BUCKET_NAME_MATCH = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")

SigningIdentity = namedtuple(
    "SigningIdentity",
    ["account_id", "account_secret", "endpoint_host", "region", "session_token"],
)

REQUESTS_BY_VERB = {
    "GET": PresignedGetRequest,
    "PUT": PresignedPutRequest,
}


def _check_expires(expires):
    if isinstance(expires, bool) or not isinstance(expires, int):
        raise MalformedInputError("Expiry must be an integer number of seconds")
    if not 0 < expires <= MAX_EXPIRES:
        raise MalformedInputError(
            "Expiry must be between 1 and {0} seconds, got {1}".format(
                MAX_EXPIRES, expires
            )
        )


def _check_parts(parts):
    if isinstance(parts, bool) or not isinstance(parts, int) or parts < 1:
        raise MalformedInputError("Part count must be a positive integer")


class Connection(object):
    """
    Presign URLs for one account on one S3-compatible endpoint.

    A connection never talks to the network and never mutates itself after
    construction, so one instance may be shared between threads.

    Args:
        account_id (str): Account (key) id
        account_secret (str): Account secret
        endpoint (str): S3-compatible endpoint hostname
        region (str): Region token
        session_token (str): Value for ``X-Amz-Security-Token``
        tls (bool): Build ``https`` URLs (default) or ``http`` ones
        default_bucket (str, optional): Bucket used when none is given
    """

    def __init__(
        self,
        account_id,
        account_secret,
        endpoint,
        region,
        session_token="",
        tls=True,
        default_bucket=None,
    ):
        self.identity = SigningIdentity(
            account_id, account_secret, endpoint, region, session_token
        )
        self.tls = tls
        self.default_bucket = default_bucket
        self.signer = SignatureV4(
            account_id, account_secret, endpoint, region, session_token
        )

    @classmethod
    def authorize(
        cls,
        account_id,
        application_key,
        session_token="",
        timeout=DEFAULT_TIMEOUT,
        authorize_url=B2_AUTHORIZE_URL,
        **kwargs
    ):
        """
        Resolve the account's endpoint and build a connection for it.

        Raises:
            ResolutionError: If the endpoint or region cannot be resolved
        """
        authorization = AuthorizeAccountRequest(
            account_id, application_key, timeout, authorize_url
        ).run()
        return cls(
            account_id,
            application_key,
            authorization.endpoint_host,
            authorization.region,
            session_token,
            **kwargs
        )

    @property
    def endpoint(self):
        return self.identity.endpoint_host

    @property
    def region(self):
        return self.identity.region

    def bucket(self, bucket):
        """Return ``bucket`` or the default one."""
        bucket = bucket or self.default_bucket
        if not bucket:
            raise MalformedInputError("No bucket given and no default bucket set")
        bucket = str(bucket)
        if not BUCKET_NAME_MATCH.match(bucket):
            raise MalformedInputError("Invalid bucket name {0!r}".format(bucket))
        return bucket

    def _key(self, key):
        if not key or not str(key).lstrip("/"):
            raise MalformedInputError("Object key cannot be empty")
        return str(key)

    def presigned_url(self, verb, key, bucket=None, expires=DEFAULT_EXPIRES, timestamp=None):
        """
        Presign a single-object request.

        Args:
            verb (str): ``GET`` or ``PUT``
            key (str): Object key, not URL-encoded
            bucket (str, optional): Bucket name
            expires (int): Lifetime in seconds, passed through unclamped
            timestamp (datetime, optional): Signing instant, defaults to now

        Returns:
            str: Presigned URL
        """
        try:
            request_class = REQUESTS_BY_VERB[str(verb).upper()]
        except KeyError:
            raise MalformedInputError("Unsupported HTTP verb {0!r}".format(verb))
        _check_expires(expires)
        return request_class(
            self, self._key(key), self.bucket(bucket), expires, timestamp
        ).run()

    def presigned_get_url(self, key, bucket=None, expires=DEFAULT_EXPIRES, timestamp=None):
        return self.presigned_url("GET", key, bucket, expires, timestamp)

    def presigned_put_url(self, key, bucket=None, expires=DEFAULT_EXPIRES, timestamp=None):
        return self.presigned_url("PUT", key, bucket, expires, timestamp)

    def presigned_multipart_put_url(
        self, key, upload_id, parts, bucket=None, expires=DEFAULT_EXPIRES, timestamp=None
    ):
        """
        Presign every part of a multipart upload.

        Args:
            key (str): Object key
            upload_id (str): Multipart upload ID
            parts (int): Number of parts
            bucket (str, optional): Bucket name
            expires (int): Lifetime of every URL in seconds
            timestamp (datetime, optional): Signing instant shared by all parts

        Returns:
            list: ``parts`` presigned URLs, ordered by part number
        """
        _check_expires(expires)
        _check_parts(parts)
        if not upload_id:
            raise MalformedInputError("Upload ID cannot be empty")
        return PresignedMultipartUploadRequest(
            self, self._key(key), self.bucket(bucket), upload_id, parts, expires, timestamp
        ).run()

    def __repr__(self):
        return "<Connection account_id={0!r} endpoint={1!r} region={2!r}>".format(
            self.identity.account_id, self.endpoint, self.region
        )
