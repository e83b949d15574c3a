"""
Signed URL Negotiator

Asks the service for a temporary URL bound to a file name and content digest.
No file bytes are sent here; the transfer itself happens in transfer.py.
"""

import logging
from typing import Optional

from superpowered.api.client import APIClient, APIError
from superpowered.services.upload.exceptions import NegotiationError
from superpowered.services.upload.schemas import (
    SignedUrlGrant,
    SignedUrlMethod,
    UploadOptions,
)

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "PUT")


class SignedUrlNegotiator:
    """Requests signed upload and download URLs from the service."""

    def __init__(self, api: APIClient):
        self._api = api

    async def request_signed_url(
        self,
        knowledge_base_id: str,
        filename: str,
        digest: str,
        method: SignedUrlMethod = "PUT",
        options: Optional[UploadOptions] = None,
    ) -> SignedUrlGrant:
        """
        Request a signed URL for a file in a knowledge base.

        Args:
            knowledge_base_id: Target knowledge base
            filename: Name the document is stored under
            digest: Base64 MD5 digest of the file contents
            method: PUT for uploads, GET for downloads
            options: Document metadata forwarded with the request

        Returns:
            SignedUrlGrant holding the temporary URL

        Raises:
            ValueError: If the knowledge base id is empty or the method is unsupported
            NegotiationError: If the service rejects the request
        """
        if not knowledge_base_id:
            raise ValueError("knowledge_base_id must not be empty")
        if not isinstance(method, str) or method.upper() not in ALLOWED_METHODS:
            raise ValueError(f"method must be one of {ALLOWED_METHODS}, got {method!r}")
        method = method.upper()

        body = {"filename": filename, "encoded_md5": digest, "method": method}
        if options is not None:
            body.update(options.to_body())

        try:
            data = await self._api.request(
                "POST",
                f"/knowledge_bases/{knowledge_base_id}/documents/request_signed_file_url",
                json=body,
            )
        except APIError as e:
            raise NegotiationError(e.message, e.status_code, e.body) from e

        temporary_url = data.get("temporary_url") if isinstance(data, dict) else None
        if not isinstance(temporary_url, str) or not temporary_url:
            raise NegotiationError("Signed URL response has no temporary_url", body=data)

        logger.debug(f"Signed {method} URL granted for {filename} in {knowledge_base_id}")
        return SignedUrlGrant(temporary_url=temporary_url)
