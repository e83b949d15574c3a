"""
Superpowered API client.
"""

from typing import Optional

import httpx

from superpowered.api.chat import ChatAPI
from superpowered.api.client import APIClient
from superpowered.api.documents import DocumentAPI
from superpowered.api.knowledge_bases import KnowledgeBaseAPI
from superpowered.services.upload import (
    DirectUploader,
    DocumentUploader,
    SignedUrlNegotiator,
)
from superpowered.settings import settings


class SuperpoweredClient:
    """
    Entry point for the Superpowered API.

    Resource groups are exposed as attributes:
    knowledge_bases, documents and chat.
    """

    def __init__(
        self,
        api_key_id: Optional[str] = None,
        api_key_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        upload_timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key_id: API key id (defaults to settings)
            api_key_secret: API key secret (defaults to settings)
            base_url: API base URL (defaults to settings)
            timeout: API call timeout in seconds (defaults to settings)
            upload_timeout: Direct transfer timeout in seconds (defaults to settings)
            transport: httpx transport shared by API calls and direct transfers
        """
        credentials = settings.credentials
        transport_settings = settings.transport

        self.api = APIClient(
            api_key_id=api_key_id or credentials.api_key_id,
            api_key_secret=api_key_secret or credentials.api_key_secret,
            base_url=base_url or transport_settings.base_url,
            timeout=timeout if timeout is not None else transport_settings.timeout,
            transport=transport,
        )
        uploader = DocumentUploader(
            negotiator=SignedUrlNegotiator(self.api),
            uploader=DirectUploader(
                timeout=(
                    upload_timeout
                    if upload_timeout is not None
                    else transport_settings.upload_timeout
                ),
                transport=transport,
            ),
        )

        self.knowledge_bases = KnowledgeBaseAPI(self.api)
        self.documents = DocumentAPI(self.api, uploader)
        self.chat = ChatAPI(self.api)
