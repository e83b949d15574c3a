"""
Schemas for the document upload pipeline.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SignedUrlMethod = Literal["GET", "PUT"]


class UploadOptions(BaseModel):
    """Optional metadata attached to an uploaded document.

    Every field defaults to None, which omits it from the signed URL request.
    """

    model_config = ConfigDict(frozen=True)

    link_to_source: Optional[str] = Field(None, description="Where the document came from")
    supp_id: Optional[str] = Field(None, description="Caller supplied identifier")
    description: Optional[str] = None
    is_update: Optional[bool] = Field(
        None, description="Replace an existing document with the same file name"
    )
    chunk_header: Optional[str] = Field(
        None, description="Text prepended to every chunk of the document"
    )
    auto_context: Optional[bool] = None

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class SignedUrlGrant(BaseModel):
    """Single-use URL issued by the service for a direct transfer."""

    model_config = ConfigDict(frozen=True)

    temporary_url: str


class UploadResult(BaseModel):
    """Outcome of a document upload.

    A duplicate upload is reported with success=False and the id of the
    document that already holds the same content.
    """

    success: bool
    existing_document_id: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def is_duplicate(self) -> bool:
        return not self.success and self.error_message is not None
