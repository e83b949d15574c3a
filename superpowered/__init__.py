"""
Superpowered Client

Async Python client for the Superpowered knowledge base and chat API.

Usage:
    from superpowered import SuperpoweredClient

    client = SuperpoweredClient()  # reads SUPERPOWERED_API_KEY_ID / _SECRET
    kb = await client.knowledge_bases.create_knowledge_base("Handbook")
    result = await client.documents.upload_file(kb["id"], "handbook.pdf")
    thread = await client.chat.create_thread(title="Questions")
    reply = await client.chat.get_response(
        thread["id"], "What is the vacation policy?", knowledge_base_ids=[kb["id"]]
    )
"""

from superpowered.api.client import APIError
from superpowered.api.models import (
    ChatThreadDefaultOptions,
    SummaryConfig,
    WebSearchConfig,
)
from superpowered.client import SuperpoweredClient
from superpowered.services.upload import (
    NegotiationError,
    SignedUrlGrant,
    TransferFailure,
    UploadError,
    UploadOptions,
    UploadResult,
    compute_content_digest,
)

__all__ = [
    "APIError",
    "ChatThreadDefaultOptions",
    "NegotiationError",
    "SignedUrlGrant",
    "SummaryConfig",
    "SuperpoweredClient",
    "TransferFailure",
    "UploadError",
    "UploadOptions",
    "UploadResult",
    "WebSearchConfig",
    "compute_content_digest",
]
