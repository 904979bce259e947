"""
b2presign.datetime_utils
~~~~~~~~~~~~~~~~~~~~~~~~

UTC clock access and the two timestamp formats SigV4 uses.
"""

from datetime import datetime, timezone

AMZ_DATE_FORMAT = "%Y%m%dT%H%M%SZ"
DATE_STAMP_FORMAT = "%Y%m%d"


def get_utc_datetime():
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(timestamp):
    """
    Normalize a datetime to UTC.

    Naive datetimes are taken to already be in UTC.
    """
    if timestamp is None:
        return get_utc_datetime()
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def amz_date(timestamp):
    """Format as ``YYYYMMDDTHHMMSSZ``."""
    return to_utc(timestamp).strftime(AMZ_DATE_FORMAT)


def date_stamp(timestamp):
    """Format as ``YYYYMMDD``."""
    return to_utc(timestamp).strftime(DATE_STAMP_FORMAT)
