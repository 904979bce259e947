"""
b2presign.operations.multipart_requests
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Presigned URLs for the parts of a multipart upload.
"""

from ..datetime_utils import to_utc
from ..exceptions import MalformedInputError
from . import PresignRequest


class PresignedUploadPartRequest(PresignRequest):
    """
    Presign the upload of a single part of a multipart upload.

    Args:
        conn: Connection object
        key (str): Object key
        bucket (str): Bucket name
        part_num (int): Part number (1-based)
        upload_id (str): Multipart upload ID
        expires (int): Lifetime of the URL in seconds
        timestamp (datetime, optional): Signing instant
    """

    method = "PUT"
    operation = "UploadPart"

    def __init__(self, conn, key, bucket, part_num, upload_id, expires, timestamp=None):
        super(PresignedUploadPartRequest, self).__init__(
            conn, key, bucket, expires, timestamp
        )
        self.part_num = part_num
        self.upload_id = upload_id

    def extra_params(self):
        return [("partNumber", str(self.part_num)), ("uploadId", self.upload_id)]


class PresignedMultipartUploadRequest(object):
    """
    Presign every part of a multipart upload.

    All parts share one signing instant, so they share one credential scope.
    Each part still gets its own signature since ``partNumber`` differs.

    Args:
        conn: Connection object
        key (str): Object key
        bucket (str): Bucket name
        upload_id (str): Multipart upload ID
        parts (int): Number of parts, at least 1
        expires (int): Lifetime of every URL in seconds
        timestamp (datetime, optional): Signing instant
    """

    def __init__(self, conn, key, bucket, upload_id, parts, expires, timestamp=None):
        self.conn = conn
        self.key = key
        self.bucket = bucket
        self.upload_id = upload_id
        self.parts = parts
        self.expires = expires
        self.timestamp = to_utc(timestamp)

    def part_requests(self):
        for part_num in range(1, self.parts + 1):
            yield PresignedUploadPartRequest(
                self.conn,
                self.key,
                self.bucket,
                part_num,
                self.upload_id,
                self.expires,
                self.timestamp,
            )

    def run(self):
        """
        Sign all parts.

        Returns:
            list: Presigned URLs ordered by part number

        Raises:
            HostUnresolvable: If any part cannot be signed; no partial list
                is returned
        """
        return [request.run() for request in self.part_requests()]


def parts_for_size(total_size, part_size):
    """
    Number of parts needed to upload ``total_size`` bytes.

    Args:
        total_size (int): Object size in bytes
        part_size (int): Size of every part but the last, e.g. the
            ``recommended_part_size`` reported by account authorization

    Returns:
        int: Part count, at least 1
    """
    if part_size <= 0:
        raise MalformedInputError("Part size must be positive")
    if total_size < 0:
        raise MalformedInputError("Object size cannot be negative")
    return max(1, -(-total_size // part_size))
