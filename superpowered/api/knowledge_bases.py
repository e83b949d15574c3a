"""
Knowledge base management endpoints.
"""

from typing import Any, Optional

from superpowered.api.client import APIClient
from superpowered.api.models import (
    KnowledgeBaseCreate,
    KnowledgeBaseQuery,
    KnowledgeBaseUpdate,
    QuerySegmentLength,
    SummaryConfig,
    WebSearchConfig,
)


class KnowledgeBaseAPI:
    """Knowledge base CRUD and search."""

    def __init__(self, api: APIClient):
        self._api = api

    async def list_knowledge_bases(
        self,
        limit: Optional[int] = None,
        next_page_token: Optional[str] = None,
        title_begins_with: Optional[str] = None,
        supp_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        List knowledge bases.

        Args:
            limit: Maximum knowledge bases to return
            next_page_token: Token from a previous page
            title_begins_with: Filter by title prefix
            supp_id: Filter by supplementary id

        Returns:
            Dict with "knowledge_bases" and an optional "next_page_token"
        """
        return await self._api.request(
            "GET",
            "/knowledge_bases",
            params={
                "limit": limit,
                "next_page_token": next_page_token,
                "title_begins_with": title_begins_with,
                "supp_id": supp_id,
            },
        )

    async def create_knowledge_base(
        self,
        title: str,
        description: Optional[str] = None,
        supp_id: Optional[str] = None,
        language_code: Optional[str] = None,
    ) -> dict[str, Any]:
        """Create a knowledge base and return it."""
        payload = KnowledgeBaseCreate(
            title=title,
            description=description,
            supp_id=supp_id,
            language_code=language_code,
        ).to_body()
        return await self._api.request("POST", "/knowledge_bases", json=payload)

    async def get_knowledge_base(self, knowledge_base_id: str) -> dict[str, Any]:
        return await self._api.request("GET", f"/knowledge_bases/{knowledge_base_id}")

    async def update_knowledge_base(
        self,
        knowledge_base_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        supp_id: Optional[str] = None,
        language_code: Optional[str] = None,
    ) -> dict[str, Any]:
        """Update the given fields of a knowledge base and return it."""
        payload = KnowledgeBaseUpdate(
            title=title,
            description=description,
            supp_id=supp_id,
            language_code=language_code,
        ).to_body()
        return await self._api.request(
            "PATCH", f"/knowledge_bases/{knowledge_base_id}", json=payload
        )

    async def delete_knowledge_base(self, knowledge_base_id: str) -> None:
        await self._api.request("DELETE", f"/knowledge_bases/{knowledge_base_id}")

    async def query_knowledge_bases(
        self,
        query: str,
        knowledge_base_ids: list[str],
        top_k: Optional[int] = None,
        exclude_irrelevant_results: Optional[bool] = None,
        summarize_results: Optional[bool] = None,
        summary_config: Optional[SummaryConfig] = None,
        use_auto_query: Optional[bool] = None,
        use_rse: Optional[bool] = None,
        segment_length: Optional[QuerySegmentLength] = None,
        summary_system_message: Optional[str] = None,
        auto_query_guidance: Optional[str] = None,
        json_response: Optional[bool] = None,
        use_web_search: Optional[bool] = None,
        web_search_config: Optional[WebSearchConfig] = None,
        is_async: Optional[bool] = None,
    ) -> dict[str, Any]:
        """
        Search one or more knowledge bases.

        Args:
            query: Search query
            knowledge_base_ids: Knowledge bases to search
            top_k: Number of results to return
            exclude_irrelevant_results: Drop results the reranker scores as irrelevant
            summarize_results: Ask the service for a summary of the results
            summary_config: Summary options, such as its system message
            use_auto_query: Let the service rewrite the query
            use_rse: Use relevant segment extraction
            segment_length: Segment length for RSE (short, medium or long)
            summary_system_message: Top-level system message for the summary
            auto_query_guidance: Guidance for query rewriting
            json_response: Request a JSON formatted summary
            use_web_search: Include web results
            web_search_config: Web search restrictions
            is_async: Run as a background job and return its status

        Returns:
            Query results, or an async job description when is_async is set
        """
        payload = KnowledgeBaseQuery(
            query=query,
            knowledge_base_ids=knowledge_base_ids,
            top_k=top_k,
            exclude_irrelevant_results=exclude_irrelevant_results,
            summarize_results=summarize_results,
            summary_config=summary_config,
            use_auto_query=use_auto_query,
            use_rse=use_rse,
            segment_length=segment_length,
            summary_system_message=summary_system_message,
            auto_query_guidance=auto_query_guidance,
            json_response=json_response,
            use_web_search=use_web_search,
            web_search_config=web_search_config,
            is_async=is_async,
        ).to_body()
        return await self._api.request("POST", "/knowledge_bases/query", json=payload)
