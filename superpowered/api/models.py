"""
Pydantic models for API request bodies.

Knowledge Base Models:
- KnowledgeBaseCreate/Update: Knowledge base management
- KnowledgeBaseQuery: Search across knowledge bases

Document Models:
- DocumentUpdate: Metadata changes
- RawTextDocumentCreate / UrlDocumentCreate: Non-file ingestion

Chat Models:
- ChatThreadCreate/Update: Thread management
- ChatRequest: Body of a get_response call

Fields left as None are dropped from the request body.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

SegmentLength = Literal["very_short", "short", "medium", "long"]
QuerySegmentLength = Literal["short", "medium", "long"]
ResponseLength = Literal["short", "medium", "long"]
InteractionOrder = Literal["asc", "desc"]


class RequestModel(BaseModel):
    """Base for request bodies."""

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


# =============================================================================
# Shared
# =============================================================================


class WebSearchConfig(RequestModel):
    """Web search restrictions for queries and chat responses."""

    web_search_preset_id: Optional[str] = None
    include_domains: Optional[list[str]] = None
    exclude_domains: Optional[list[str]] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    timeframe_days: Optional[int] = None


# =============================================================================
# Knowledge Bases
# =============================================================================


class KnowledgeBaseCreate(RequestModel):
    """Request for creating a knowledge base."""

    title: str = Field(..., min_length=1, description="Knowledge base title")
    description: Optional[str] = None
    supp_id: Optional[str] = None
    language_code: Optional[str] = None


class KnowledgeBaseUpdate(RequestModel):
    """Request for updating a knowledge base."""

    title: Optional[str] = None
    description: Optional[str] = None
    supp_id: Optional[str] = None
    language_code: Optional[str] = None


class SummaryConfig(RequestModel):
    system_message: str


class KnowledgeBaseQuery(RequestModel):
    """Request for querying one or more knowledge bases."""

    query: str = Field(..., min_length=1, description="Search query")
    knowledge_base_ids: list[str] = Field(default_factory=list)
    top_k: Optional[int] = None
    exclude_irrelevant_results: Optional[bool] = None
    summarize_results: Optional[bool] = None
    summary_config: Optional[SummaryConfig] = None
    use_auto_query: Optional[bool] = None
    use_rse: Optional[bool] = None
    segment_length: Optional[QuerySegmentLength] = None
    summary_system_message: Optional[str] = None
    auto_query_guidance: Optional[str] = None
    json_response: Optional[bool] = None
    use_web_search: Optional[bool] = None
    web_search_config: Optional[WebSearchConfig] = None
    is_async: Optional[bool] = Field(None, serialization_alias="async")

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, by_alias=True)


# =============================================================================
# Documents
# =============================================================================


class DocumentUpdate(RequestModel):
    """Request for updating document metadata."""

    title: Optional[str] = None
    supp_id: Optional[str] = None
    description: Optional[str] = None
    link_to_source: Optional[str] = None


class RawTextDocumentCreate(RequestModel):
    """Request for creating a document from raw text."""

    content: str = Field(..., description="Document text")
    title: str = Field(..., description="Document title")
    link_to_source: Optional[str] = None
    supp_id: Optional[str] = None
    description: Optional[str] = None
    chunk_header: Optional[str] = None
    auto_context: Optional[bool] = None


class UrlDocumentCreate(RequestModel):
    """Request for creating a document from a web page."""

    url: str = Field(..., min_length=1, description="Page to ingest")
    title: Optional[str] = None
    supp_id: Optional[str] = None
    description: Optional[str] = None
    html_exclude_tags: Optional[list[str]] = None
    chunk_header: Optional[str] = None
    auto_context: Optional[bool] = None
    use_proxy: Optional[bool] = None
    proxy_country_code: Optional[str] = None


# =============================================================================
# Chat
# =============================================================================


class ChatThreadDefaultOptions(RequestModel):
    """Default generation options stored on a chat thread."""

    knowledge_base_ids: Optional[list[str]] = None
    model: Optional[str] = None
    temperature: Optional[float] = None
    use_rse: Optional[bool] = None
    segment_length: Optional[SegmentLength] = None
    response_length: Optional[ResponseLength] = None
    system_message: Optional[str] = None
    auto_query_guidance: Optional[str] = None
    json_response: Optional[bool] = None
    use_web_search: Optional[bool] = None
    web_search_config: Optional[WebSearchConfig] = None


class ChatThreadCreate(RequestModel):
    """Request for creating a chat thread."""

    title: Optional[str] = None
    supp_id: Optional[str] = None
    default_options: Optional[ChatThreadDefaultOptions] = None


class ChatThreadUpdate(ChatThreadCreate):
    """Request for updating a chat thread."""


class ChatRequest(ChatThreadDefaultOptions):
    """Request for a model response in a chat thread.

    Any option left unset falls back to the thread's default options.
    """

    input: str = Field(..., min_length=1, description="User message")
    is_async: Optional[bool] = Field(None, serialization_alias="async")

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, by_alias=True)
