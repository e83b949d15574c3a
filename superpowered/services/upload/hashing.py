"""Content digests for upload integrity checks."""

import base64
import hashlib
from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def compute_content_digest(data: Buffer) -> str:
    """
    Compute the base64 encoded MD5 digest of a payload.

    The value is sent as the Content-MD5 header of the transfer and is used
    by the service to detect duplicate documents.

    Args:
        data: File contents

    Returns:
        Base64 MD5 digest (24 characters)
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    return base64.b64encode(hashlib.md5(data).digest()).decode("ascii")
