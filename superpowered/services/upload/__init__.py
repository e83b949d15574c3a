"""
Document Upload Service

Signed URL upload pipeline with content digests and duplicate detection.

Usage:
    from superpowered import SuperpoweredClient, UploadOptions

    client = SuperpoweredClient(api_key_id="...", api_key_secret="...")
    with open("report.pdf", "rb") as f:
        result = await client.documents.upload_document(
            "kb_123", f.read(), "report.pdf",
            options=UploadOptions(description="Quarterly report"),
        )

    if result.is_duplicate:
        print(result.existing_document_id)
"""

from superpowered.services.upload.exceptions import (
    NegotiationError,
    TransferFailure,
    UploadError,
)
from superpowered.services.upload.hashing import compute_content_digest
from superpowered.services.upload.negotiator import SignedUrlNegotiator
from superpowered.services.upload.schemas import (
    SignedUrlGrant,
    UploadOptions,
    UploadResult,
)
from superpowered.services.upload.service import DocumentUploader
from superpowered.services.upload.transfer import (
    DirectUploader,
    is_duplicate_content_error,
    resolve_transfer_error,
)
