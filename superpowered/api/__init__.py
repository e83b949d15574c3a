"""
API transport, request models and resource endpoints.
"""

from .chat import ChatAPI
from .client import APIClient, APIError
from .documents import DocumentAPI
from .knowledge_bases import KnowledgeBaseAPI
from .models import (
    ChatRequest,
    ChatThreadCreate,
    ChatThreadDefaultOptions,
    ChatThreadUpdate,
    DocumentUpdate,
    KnowledgeBaseCreate,
    KnowledgeBaseQuery,
    KnowledgeBaseUpdate,
    RawTextDocumentCreate,
    SummaryConfig,
    UrlDocumentCreate,
    WebSearchConfig,
)

__all__ = [
    "APIClient",
    "APIError",
    "ChatAPI",
    "ChatRequest",
    "ChatThreadCreate",
    "ChatThreadDefaultOptions",
    "ChatThreadUpdate",
    "DocumentAPI",
    "DocumentUpdate",
    "KnowledgeBaseAPI",
    "KnowledgeBaseCreate",
    "KnowledgeBaseQuery",
    "KnowledgeBaseUpdate",
    "RawTextDocumentCreate",
    "SummaryConfig",
    "UrlDocumentCreate",
    "WebSearchConfig",
]
