"""
Document Upload Service

Uploads a file to a knowledge base in two phases:

1. Compute the base64 MD5 digest of the file
2. Ask the service for a signed PUT URL bound to the file name and digest
3. PUT the bytes to that URL
4. Classify a failed transfer (duplicate content vs. genuine failure)

The service creates the document record asynchronously once the transfer
completes. Nothing is retried; a negotiation failure stops the upload before
any bytes are sent.
"""

import logging
from typing import Optional

from superpowered.services.upload.hashing import Buffer, compute_content_digest
from superpowered.services.upload.negotiator import SignedUrlNegotiator
from superpowered.services.upload.schemas import UploadOptions, UploadResult
from superpowered.services.upload.transfer import DirectUploader

logger = logging.getLogger(__name__)


class DocumentUploader:
    """Runs the signed URL upload pipeline for a single file."""

    def __init__(self, negotiator: SignedUrlNegotiator, uploader: DirectUploader):
        self.negotiator = negotiator
        self.uploader = uploader

    async def upload_document(
        self,
        knowledge_base_id: str,
        file_bytes: Buffer,
        file_name: str,
        options: Optional[UploadOptions] = None,
    ) -> UploadResult:
        """
        Upload a file to a knowledge base.

        Args:
            knowledge_base_id: Target knowledge base
            file_bytes: File contents
            file_name: Name the document is stored under
            options: Optional document metadata

        Returns:
            UploadResult with success=True, or the existing document id when
            the same content is already stored

        Raises:
            NegotiationError: If no signed URL could be obtained
            TransferFailure: If the transfer failed for another reason
        """
        digest = compute_content_digest(file_bytes)

        grant = await self.negotiator.request_signed_url(
            knowledge_base_id,
            file_name,
            digest,
            method="PUT",
            options=options,
        )

        result = await self.uploader.put_to_signed_url(
            grant.temporary_url, file_bytes, digest
        )
        logger.debug(
            f"Uploaded {file_name} to {knowledge_base_id}: success={result.success}"
        )
        return result
