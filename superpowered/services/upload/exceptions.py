"""
Document Upload Exceptions

Exception hierarchy for the signed-URL upload pipeline. Every error keeps the
status code and payload of the failing response. Duplicate content is not an
error: it is reported through UploadResult.
"""

from superpowered.api.client import APIError


class UploadError(APIError):
    """Base exception for document upload errors."""

    pass


class NegotiationError(UploadError):
    """Raised when the service refuses to issue a signed URL."""

    pass


class TransferFailure(UploadError):
    """Raised when the direct transfer to a signed URL fails."""

    pass
