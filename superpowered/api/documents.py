"""
Document endpoints and file uploads.
"""

from pathlib import Path
from typing import Any, Optional, Union

from superpowered.api.client import APIClient
from superpowered.api.models import (
    DocumentUpdate,
    RawTextDocumentCreate,
    UrlDocumentCreate,
)
from superpowered.services.upload import (
    DocumentUploader,
    SignedUrlGrant,
    SignedUrlNegotiator,
    UploadOptions,
    UploadResult,
)
from superpowered.services.upload.hashing import Buffer
from superpowered.services.upload.schemas import SignedUrlMethod


class DocumentAPI:
    """Documents inside a knowledge base."""

    def __init__(self, api: APIClient, uploader: DocumentUploader):
        self._api = api
        self._uploader = uploader

    @staticmethod
    def _path(knowledge_base_id: str, suffix: str = "") -> str:
        return f"/knowledge_bases/{knowledge_base_id}/documents{suffix}"

    # =========================================================================
    # Metadata
    # =========================================================================

    async def list_documents(
        self,
        knowledge_base_id: str,
        title_begins_with: Optional[str] = None,
        supp_id: Optional[str] = None,
        status: Optional[str] = None,
        link_to_source: Optional[str] = None,
        limit: Optional[int] = None,
        next_page_token: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        List documents in a knowledge base.

        Args:
            knowledge_base_id: Knowledge base to list
            title_begins_with: Filter by title prefix
            supp_id: Filter by supplementary id
            status: Filter by vectorization status
            link_to_source: Filter by source link
            limit: Maximum documents to return
            next_page_token: Token from a previous page

        Returns:
            Dict with "documents" and an optional "next_page_token"
        """
        return await self._api.request(
            "GET",
            self._path(knowledge_base_id),
            params={
                "title_begins_with": title_begins_with,
                "supp_id": supp_id,
                "status": status,
                "link_to_source": link_to_source,
                "limit": limit,
                "next_page_token": next_page_token,
            },
        )

    async def get_document(
        self,
        knowledge_base_id: str,
        document_id: str,
        include_content: bool = False,
    ) -> dict[str, Any]:
        """
        Get a single document.

        Args:
            knowledge_base_id: Owning knowledge base
            document_id: Document id
            include_content: Also return the extracted text

        Returns:
            Document record
        """
        return await self._api.request(
            "GET",
            self._path(knowledge_base_id, f"/{document_id}"),
            params={"include_content": include_content},
        )

    async def update_document(
        self,
        knowledge_base_id: str,
        document_id: str,
        title: Optional[str] = None,
        supp_id: Optional[str] = None,
        description: Optional[str] = None,
        link_to_source: Optional[str] = None,
    ) -> dict[str, Any]:
        payload = DocumentUpdate(
            title=title,
            supp_id=supp_id,
            description=description,
            link_to_source=link_to_source,
        ).to_body()
        return await self._api.request(
            "PATCH", self._path(knowledge_base_id, f"/{document_id}"), json=payload
        )

    async def delete_document(self, knowledge_base_id: str, document_id: str) -> None:
        await self._api.request("DELETE", self._path(knowledge_base_id, f"/{document_id}"))

    # =========================================================================
    # File Uploads
    # =========================================================================

    async def request_signed_file_url(
        self,
        knowledge_base_id: str,
        filename: str,
        encoded_md5: str,
        method: SignedUrlMethod = "PUT",
        options: Optional[UploadOptions] = None,
    ) -> SignedUrlGrant:
        """
        Request a signed URL for uploading (PUT) or downloading (GET) a file.

        Raises:
            NegotiationError: If the service rejects the request
        """
        return await self._uploader.negotiator.request_signed_url(
            knowledge_base_id, filename, encoded_md5, method=method, options=options
        )

    async def upload_document(
        self,
        knowledge_base_id: str,
        file_bytes: Buffer,
        file_name: str,
        options: Optional[UploadOptions] = None,
    ) -> UploadResult:
        """
        Upload file contents to a knowledge base.

        Args:
            knowledge_base_id: Target knowledge base
            file_bytes: File contents
            file_name: Name the document is stored under
            options: Optional document metadata

        Returns:
            UploadResult; a duplicate of stored content is reported through
            existing_document_id instead of raising

        Raises:
            NegotiationError: If no signed URL could be obtained
            TransferFailure: If the transfer failed
        """
        return await self._uploader.upload_document(
            knowledge_base_id, file_bytes, file_name, options=options
        )

    async def upload_file(
        self,
        knowledge_base_id: str,
        path: Union[str, Path],
        options: Optional[UploadOptions] = None,
    ) -> UploadResult:
        """Upload a local file under its base name."""
        path = Path(path)
        return await self.upload_document(
            knowledge_base_id, path.read_bytes(), path.name, options=options
        )

    # =========================================================================
    # Text and URL Ingestion
    # =========================================================================

    async def create_document_from_text(
        self,
        knowledge_base_id: str,
        content: str,
        title: str,
        link_to_source: Optional[str] = None,
        supp_id: Optional[str] = None,
        description: Optional[str] = None,
        chunk_header: Optional[str] = None,
        auto_context: Optional[bool] = None,
    ) -> dict[str, Any]:
        """Create a document from raw text and return it."""
        payload = RawTextDocumentCreate(
            content=content,
            title=title,
            link_to_source=link_to_source,
            supp_id=supp_id,
            description=description,
            chunk_header=chunk_header,
            auto_context=auto_context,
        ).to_body()
        return await self._api.request(
            "POST", self._path(knowledge_base_id, "/raw_text"), json=payload
        )

    async def create_document_from_url(
        self,
        knowledge_base_id: str,
        url: str,
        title: Optional[str] = None,
        supp_id: Optional[str] = None,
        description: Optional[str] = None,
        html_exclude_tags: Optional[list[str]] = None,
        chunk_header: Optional[str] = None,
        auto_context: Optional[bool] = None,
        use_proxy: Optional[bool] = None,
        proxy_country_code: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Create a document by scraping a web page.

        Args:
            knowledge_base_id: Target knowledge base
            url: Page to ingest
            title: Document title (defaults to the page title)
            supp_id: Supplementary id
            description: Document description
            html_exclude_tags: HTML tags to strip before extraction
            chunk_header: Text prepended to every chunk
            auto_context: Let the service generate chunk context
            use_proxy: Fetch the page through a proxy
            proxy_country_code: Proxy country

        Returns:
            Created document record
        """
        payload = UrlDocumentCreate(
            url=url,
            title=title,
            supp_id=supp_id,
            description=description,
            html_exclude_tags=html_exclude_tags,
            chunk_header=chunk_header,
            auto_context=auto_context,
            use_proxy=use_proxy,
            proxy_country_code=proxy_country_code,
        ).to_body()
        return await self._api.request(
            "POST", self._path(knowledge_base_id, "/url"), json=payload
        )
