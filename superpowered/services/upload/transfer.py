"""
Direct transfer to a signed URL.

The signed URL is pre-authorized, so the PUT goes out on a plain client with
no API credentials. Failed transfers are classified by resolve_transfer_error:
a duplicate of content already stored in the knowledge base is an expected
outcome, anything else is a TransferFailure.
"""

import logging
from typing import Any, Optional

import httpx

from superpowered.api.client import error_message_from_body, response_body
from superpowered.services.upload.exceptions import TransferFailure
from superpowered.services.upload.schemas import UploadResult

logger = logging.getLogger(__name__)

# The service reports duplicates only through this wording; there is no
# structured error code for it.
DUPLICATE_CONTENT_MARKER = "already exists in knowledge base"


def is_duplicate_content_error(message: Any) -> bool:
    """Check whether a transfer error message reports duplicate content."""
    return isinstance(message, str) and DUPLICATE_CONTENT_MARKER in message


def resolve_transfer_error(response: httpx.Response) -> UploadResult:
    """
    Classify an error response from the transfer endpoint.

    Args:
        response: Non-2xx response to the PUT

    Returns:
        UploadResult describing the existing document for a duplicate upload

    Raises:
        TransferFailure: For every other error
    """
    body = response_body(response)
    message = body.get("error") if isinstance(body, dict) else None

    if is_duplicate_content_error(message):
        existing_id = body.get("existing_document_id")
        logger.info(f"Upload skipped, content already stored as document {existing_id}")
        return UploadResult(
            success=False,
            existing_document_id=str(existing_id) if existing_id is not None else None,
            error_message=message,
        )

    detail = error_message_from_body(body, response.text or f"HTTP {response.status_code}")
    logger.error(f"Direct upload failed: HTTP {response.status_code} {detail}")
    raise TransferFailure(detail, response.status_code, body)


class DirectUploader:
    """Sends file bytes to a signed URL."""

    def __init__(
        self,
        timeout: float = 300.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self._transport = transport

    async def put_to_signed_url(
        self, url: str, file_bytes: bytes, digest: str
    ) -> UploadResult:
        """
        PUT file bytes to a signed URL.

        Args:
            url: Temporary URL from the negotiator
            file_bytes: File contents
            digest: Base64 MD5 digest of file_bytes

        Returns:
            UploadResult; success is True only for HTTP 200

        Raises:
            TransferFailure: On connection errors and non-duplicate error responses
        """
        headers = {
            "Content-MD5": digest,
            "Content-Type": "application/octet-stream",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.put(url, content=bytes(file_bytes), headers=headers)
        except httpx.RequestError as e:
            logger.error(f"Direct upload connection error: {e}")
            raise TransferFailure(f"Connection error: {str(e)}") from e

        if not response.is_success:
            return resolve_transfer_error(response)

        logger.debug(f"Direct upload finished with HTTP {response.status_code}")
        return UploadResult(success=response.status_code == 200)
