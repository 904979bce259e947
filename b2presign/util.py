"""
b2presign.util
~~~~~~~~~~~~~~

URL helpers shared by the signer and the request builders.
"""

import ipaddress
from urllib.parse import urlsplit

# RFC 3986 unreserved characters, the only ones SigV4 leaves unescaped
UNRESERVED = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~"
)


def uri_encode(value, encode_slash=True):
    """
    Percent-encode a string the way SigV4 expects.

    Every byte outside the unreserved set becomes ``%XX`` with uppercase hex.
    Multi-byte characters are encoded from their UTF-8 bytes.

    Args:
        value (str): String to encode
        encode_slash (bool): Whether ``/`` is escaped (query values) or kept
            (object key paths)

    Returns:
        str: Encoded string
    """
    result = []
    for ch in str(value):
        if ch in UNRESERVED:
            result.append(ch)
        elif ch == "/" and not encode_slash:
            result.append(ch)
        else:
            result.extend("%{0:02X}".format(b) for b in ch.encode("utf-8"))
    return "".join(result)


def encode_query(pairs):
    """Join ``(name, value)`` pairs into an encoded query string, in order."""
    return "&".join(
        "{0}={1}".format(uri_encode(name), uri_encode(value)) for name, value in pairs
    )


def url_host(url):
    """
    Return the host header value of a URL, or None if it has no usable host.

    A port is included only when the URL spells one out.
    The host is lowercased and IP literals do not count as a domain.
    """
    try:
        parsed = urlsplit(url)
        port = parsed.port
    except ValueError:
        return None

    hostname = parsed.hostname
    if not hostname or hostname.startswith(".") or hostname.endswith("."):
        return None
    if any(not label for label in hostname.split(".")):
        return None

    if is_ip_address(hostname):
        return None

    if port is not None:
        return "{0}:{1}".format(hostname, port)
    return hostname


def is_ip_address(host):
    """True if ``host`` is an IPv4 or IPv6 literal rather than a domain."""
    try:
        ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        return False
    return True
