"""
b2presign.api
~~~~~~~~~~~~~

Call boundary: resolve the account endpoint, then presign.

The ``sign_*`` functions report every outcome as a :class:`SignResult`.
The ``presigned_*`` functions collapse failures into an empty string for
callers that only test for emptiness.
"""

import json
import logging

from .connection import Connection
from .exceptions import MalformedInputError, ResolutionError, TransportError
from .resolver import DEFAULT_TIMEOUT
from .result import (
    MALFORMED_INPUT,
    RESOLUTION_FAILED,
    TRANSPORT_ERROR,
    SignResult,
)

logger = logging.getLogger(__name__)


def _sign(sign_with, account_id, account_auth_token, session_token, timeout):
    try:
        conn = Connection.authorize(
            account_id, account_auth_token, session_token, timeout=timeout
        )
        return SignResult.success(sign_with(conn))
    except TransportError as e:
        logger.warning("Transport error while authorizing account: %s", e)
        return SignResult.failure(TRANSPORT_ERROR, e)
    except ResolutionError as e:
        logger.warning("Unable to resolve S3 endpoint: %s", e)
        return SignResult.failure(RESOLUTION_FAILED, e)
    except MalformedInputError as e:
        logger.warning("Unable to presign: %s", e)
        return SignResult.failure(MALFORMED_INPUT, e)


def sign_get_url(
    key,
    bucket_name,
    expiry,
    account_id,
    account_auth_token,
    session_token,
    timeout=DEFAULT_TIMEOUT,
    timestamp=None,
):
    return _sign(
        lambda conn: conn.presigned_get_url(key, bucket_name, expiry, timestamp),
        account_id,
        account_auth_token,
        session_token,
        timeout,
    )


def sign_put_url(
    key,
    bucket_name,
    expiry,
    account_id,
    account_auth_token,
    session_token,
    timeout=DEFAULT_TIMEOUT,
    timestamp=None,
):
    return _sign(
        lambda conn: conn.presigned_put_url(key, bucket_name, expiry, timestamp),
        account_id,
        account_auth_token,
        session_token,
        timeout,
    )


def sign_multipart_put_url(
    key,
    bucket_name,
    expiry,
    parts,
    upload_id,
    account_id,
    account_auth_token,
    session_token,
    timeout=DEFAULT_TIMEOUT,
    timestamp=None,
):
    """Sign every part of a multipart upload; the result value is a list."""
    return _sign(
        lambda conn: conn.presigned_multipart_put_url(
            key, upload_id, parts, bucket_name, expiry, timestamp
        ),
        account_id,
        account_auth_token,
        session_token,
        timeout,
    )


def presigned_get_url(
    key,
    bucket_name,
    expiry,
    account_id,
    account_auth_token,
    session_token,
    timeout=DEFAULT_TIMEOUT,
    timestamp=None,
):
    """Presigned GET URL, or ``""`` on failure."""
    return sign_get_url(
        key,
        bucket_name,
        expiry,
        account_id,
        account_auth_token,
        session_token,
        timeout,
        timestamp,
    ).unwrap_or("")


def presigned_put_url(
    key,
    bucket_name,
    expiry,
    account_id,
    account_auth_token,
    session_token,
    timeout=DEFAULT_TIMEOUT,
    timestamp=None,
):
    """Presigned PUT URL, or ``""`` on failure."""
    return sign_put_url(
        key,
        bucket_name,
        expiry,
        account_id,
        account_auth_token,
        session_token,
        timeout,
        timestamp,
    ).unwrap_or("")


def presigned_multipart_put_url(
    key,
    bucket_name,
    expiry,
    parts,
    upload_id,
    account_id,
    account_auth_token,
    session_token,
    timeout=DEFAULT_TIMEOUT,
    timestamp=None,
):
    """JSON list of presigned part URLs, or ``""`` on failure."""
    result = sign_multipart_put_url(
        key,
        bucket_name,
        expiry,
        parts,
        upload_id,
        account_id,
        account_auth_token,
        session_token,
        timeout,
        timestamp,
    )
    if not result.ok:
        return ""
    return json.dumps(result.value)
