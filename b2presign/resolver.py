"""
b2presign.resolver
~~~~~~~~~~~~~~~~~~

Backblaze B2 account authorization.

Exchanges an application key id/key pair for the account's S3-compatible
endpoint hostname and the region token embedded in it.
"""

import logging
from collections import namedtuple
from urllib.parse import urlsplit

import requests

from .exceptions import ResolutionError, TransportError
from .util import is_ip_address

logger = logging.getLogger(__name__)

B2_AUTHORIZE_URL = "https://api.backblazeb2.com/b2api/v2/b2_authorize_account"
DEFAULT_TIMEOUT = 10

B2Authorization = namedtuple(
    "B2Authorization",
    [
        "endpoint_host",
        "region",
        "s3_api_url",
        "api_url",
        "download_url",
        "authorization_token",
        "recommended_part_size",
        "absolute_minimum_part_size",
    ],
)


def region_from_s3_api_url(s3_api_host):
    """
    Infer the region from an S3 API hostname.

    Examples:
        >>> region_from_s3_api_url('s3.us-east-005.backblazeb2.com')
        'us-east-005'

    Returns:
        str: The second dot-separated label, or None if there is none
    """
    labels = s3_api_host.split(".")
    if len(labels) < 2 or not labels[1]:
        return None
    return labels[1]


def endpoint_from_s3_api_url(s3_api_url):
    """
    Split an S3 API URL into ``(endpoint_host, region)``.

    Raises:
        ResolutionError: If the URL has no host or the region cannot be inferred
    """
    if not isinstance(s3_api_url, str):
        raise ResolutionError("S3 API URL must be a string, got {0!r}".format(s3_api_url))
    try:
        host = urlsplit(s3_api_url).hostname
    except ValueError:
        raise ResolutionError("Unable to parse S3 API URL {0!r}".format(s3_api_url))
    if not host:
        raise ResolutionError("Unable to parse S3 endpoint from {0!r}".format(s3_api_url))
    if is_ip_address(host):
        raise ResolutionError("S3 API URL {0!r} has no domain".format(s3_api_url))

    region = region_from_s3_api_url(host)
    if region is None:
        raise ResolutionError("Unable to infer S3 region from {0!r}".format(host))
    return host, region


class AuthorizeAccountRequest(object):
    """
    Call ``b2_authorize_account``.

    Args:
        account_id (str): Application key id
        application_key (str): Application key
        timeout (float): Seconds to wait for the authorization call
        url (str): Authorization endpoint
    """

    def __init__(
        self, account_id, application_key, timeout=DEFAULT_TIMEOUT, url=B2_AUTHORIZE_URL
    ):
        self.account_id = account_id
        self.application_key = application_key
        self.timeout = timeout
        self.url = url

    def adapter(self):
        """
        Get the HTTP adapter for making requests.

        Returns the requests module by default, but can be overridden
        for testing with mock adapters.
        """
        return requests

    def run(self):
        """
        Execute the authorization request.

        Returns:
            B2Authorization: Resolved endpoint, region and account limits

        Raises:
            TransportError: If the call fails or returns a non-2xx status
            ResolutionError: If the response cannot be interpreted
        """
        response = self._make_request()

        try:
            body = response.json()
        except ValueError as e:
            raise ResolutionError("Malformed authorization response: {0}".format(e))
        if not isinstance(body, dict) or not body.get("s3ApiUrl"):
            raise ResolutionError("Authorization response has no s3ApiUrl")

        endpoint_host, region = endpoint_from_s3_api_url(body["s3ApiUrl"])
        logger.debug("Resolved endpoint %s in region %s", endpoint_host, region)
        return B2Authorization(
            endpoint_host=endpoint_host,
            region=region,
            s3_api_url=body["s3ApiUrl"],
            api_url=body.get("apiUrl"),
            download_url=body.get("downloadUrl"),
            authorization_token=body.get("authorizationToken"),
            recommended_part_size=body.get("recommendedPartSize"),
            absolute_minimum_part_size=body.get("absoluteMinimumPartSize"),
        )

    def _make_request(self):
        adapter = self.adapter()
        try:
            response = adapter.get(
                self.url,
                auth=(self.account_id, self.application_key),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError("Account authorization failed: {0}".format(e))
        return response


def resolve_endpoint(account_id, application_key, timeout=DEFAULT_TIMEOUT):
    """
    Resolve the S3-compatible endpoint of an account.

    Returns:
        tuple: ``(endpoint_host, region)``
    """
    authorization = AuthorizeAccountRequest(account_id, application_key, timeout).run()
    return authorization.endpoint_host, authorization.region
