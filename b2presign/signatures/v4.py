"""
b2presign.signatures.v4
~~~~~~~~~~~~~~~~~~~~~~~

AWS Signature Version 4, query-string (presigned URL) variant.

The payload is never hashed: every canonical request carries the
``UNSIGNED-PAYLOAD`` placeholder and signs the ``host`` header only.
"""

import hashlib
import hmac
from urllib.parse import parse_qsl, urlsplit

from ..datetime_utils import amz_date, date_stamp
from ..exceptions import HostUnresolvable
from ..util import encode_query, uri_encode, url_host
from .base import BaseSignature

ALGORITHM = "AWS4-HMAC-SHA256"
UNSIGNED_PAYLOAD = "UNSIGNED-PAYLOAD"
SERVICE = "s3"
TERMINATOR = "aws4_request"
SIGNED_HEADERS = "host"
SIGNATURE_PARAM = "X-Amz-Signature"


def hmac_sha256(key, msg):
    if not isinstance(msg, bytes):
        msg = msg.encode("utf-8")
    return hmac.new(key, msg, hashlib.sha256).digest()


def credential_scope(date, region, service=SERVICE):
    return "{0}/{1}/{2}/{3}".format(date, region, service, TERMINATOR)


def canonical_query_string(query):
    """
    Get canonical query string.

    Pairs are decoded, re-encoded with the SigV4 rules and sorted by name
    then value. ``X-Amz-Signature`` never takes part in its own signature.
    """
    if not query:
        return ""

    params = [
        (uri_encode(name), uri_encode(value))
        for name, value in parse_qsl(query, keep_blank_values=True)
        if name != SIGNATURE_PARAM
    ]
    params.sort()
    return "&".join("=".join(p) for p in params)


def build_canonical_request(method, object_key, request_url):
    """
    Create the canonical request for a presigned URL.

    Args:
        method (str): HTTP method
        object_key (str): Object key, not URL-encoded
        request_url (str): Absolute URL carrying the query parameters to sign

    Returns:
        str: Canonical request string

    Raises:
        HostUnresolvable: If ``request_url`` has no usable host
    """
    host = url_host(request_url)
    if host is None:
        raise HostUnresolvable(request_url)

    canonical_uri = "/" + uri_encode(object_key, encode_slash=False)
    query = canonical_query_string(urlsplit(request_url).query)

    return "\n".join(
        [
            method.upper(),
            canonical_uri,
            query,
            "host:{0}".format(host),
            "",
            SIGNED_HEADERS,
            UNSIGNED_PAYLOAD,
        ]
    )


def build_string_to_sign(canonical_request, iso_timestamp, scope):
    canonical_request_hash = hashlib.sha256(
        canonical_request.encode("utf-8")
    ).hexdigest()
    return "\n".join([ALGORITHM, iso_timestamp, scope, canonical_request_hash])


def derive_signing_key(secret, date, region, service=SERVICE):
    """
    Run the four-stage HMAC-SHA256 key derivation.

    Args:
        secret (str): Account secret
        date (str): ``YYYYMMDD`` date stamp
        region (str): Region token
        service (str): Service name

    Returns:
        bytes: The signing key
    """
    k_date = hmac_sha256(("AWS4" + secret).encode("utf-8"), date)
    k_region = hmac_sha256(k_date, region)
    k_service = hmac_sha256(k_region, service)
    return hmac_sha256(k_service, TERMINATOR)


def sign(secret, date, region, string_to_sign):
    """Return the hex signature of ``string_to_sign``."""
    signing_key = derive_signing_key(secret, date, region)
    return hmac.new(
        signing_key, string_to_sign.encode("utf-8"), hashlib.sha256
    ).hexdigest()


def append_signature(url, signature):
    separator = "&" if urlsplit(url).query else "?"
    return url + separator + encode_query([(SIGNATURE_PARAM, signature)])


class SignatureV4(BaseSignature):
    """
    SigV4 presigner bound to one account, endpoint and region.

    Instances hold no state besides their credentials; every call derives
    its canonical request and signing key from scratch.
    """

    def __init__(self, access_key, secret_key, endpoint, region, session_token=""):
        """
        Initialize Signature Version 4.

        Args:
            access_key (str): Account (key) id
            secret_key (str): Account secret
            endpoint (str): S3-compatible endpoint hostname
            region (str): Region token used in the credential scope
            session_token (str): Value for ``X-Amz-Security-Token``
        """
        super(SignatureV4, self).__init__(access_key, secret_key, endpoint)
        self.region = region
        self.session_token = session_token
        self.service = SERVICE

    def credential_scope(self, timestamp):
        return credential_scope(date_stamp(timestamp), self.region, self.service)

    def credential(self, timestamp):
        """Value of ``X-Amz-Credential`` for the given instant."""
        return "{0}/{1}".format(self.access_key, self.credential_scope(timestamp))

    def signature(self, method, key, url, timestamp):
        """
        Calculate the signature of ``url``.

        Args:
            method (str): HTTP method
            key (str): Object key
            url (str): URL with every parameter except the signature
            timestamp (datetime): Signing instant, must match ``X-Amz-Date``

        Returns:
            str: Hex-encoded signature
        """
        canonical_request = build_canonical_request(method, key, url)
        string_to_sign = build_string_to_sign(
            canonical_request, amz_date(timestamp), self.credential_scope(timestamp)
        )
        return sign(self.secret_key, date_stamp(timestamp), self.region, string_to_sign)

    def presign(self, method, key, url, timestamp):
        return append_signature(url, self.signature(method, key, url, timestamp))


def verify_presigned_url(method, key, url, secret, region):
    """
    Check the signature embedded in a presigned URL.

    The signing date is read back from the URL's own ``X-Amz-Date``
    parameter; the credential scope is rebuilt from that date and ``region``.

    Returns:
        bool: True if the recomputed signature matches
    """
    params = dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))
    embedded = params.get(SIGNATURE_PARAM)
    iso_timestamp = params.get("X-Amz-Date")
    if not embedded or not iso_timestamp:
        return False

    date = iso_timestamp[:8]
    string_to_sign = build_string_to_sign(
        build_canonical_request(method, key, url),
        iso_timestamp,
        credential_scope(date, region),
    )
    expected = sign(secret, date, region, string_to_sign)
    return hmac.compare_digest(expected, embedded)
