"""
b2presign.signatures.base
~~~~~~~~~~~~~~~~~~~~~~~~~

Base class for URL signature implementations.
"""


class BaseSignature(object):
    """Base class for URL signature implementations."""

    def __init__(self, access_key, secret_key, endpoint):
        """
        Initialize the signature implementation.

        Args:
            access_key (str): Account (key) id
            secret_key (str): Account secret
            endpoint (str): S3-compatible endpoint hostname
        """
        self.access_key = access_key
        self.secret_key = secret_key
        self.endpoint = endpoint

    def presign(self, method, key, url, timestamp):
        """
        Sign the given URL.

        Args:
            method (str): HTTP method the URL will be used with
            key (str): Object key the URL addresses
            url (str): URL carrying every query parameter except the signature
            timestamp (datetime): Signing instant

        Returns:
            str: The signed URL
        """
        raise NotImplementedError("Subclasses must implement presign")

    def __repr__(self):
        return "<{0} access_key={1!r} endpoint={2!r}>".format(
            type(self).__name__, self.access_key, self.endpoint
        )
