"""
Chat thread endpoints.
"""

from typing import Any, Optional

from superpowered.api.client import APIClient
from superpowered.api.models import (
    ChatRequest,
    ChatThreadCreate,
    ChatThreadDefaultOptions,
    ChatThreadUpdate,
    InteractionOrder,
    ResponseLength,
    SegmentLength,
    WebSearchConfig,
)


class ChatAPI:
    """Chat threads and their interactions."""

    def __init__(self, api: APIClient):
        self._api = api

    # =========================================================================
    # Threads
    # =========================================================================

    async def create_thread(
        self,
        title: Optional[str] = None,
        supp_id: Optional[str] = None,
        default_options: Optional[ChatThreadDefaultOptions] = None,
    ) -> dict[str, Any]:
        """
        Create a chat thread.

        Args:
            title: Optional thread title
            supp_id: Optional supplementary id
            default_options: Options applied to every response in the thread

        Returns:
            Created thread
        """
        payload = ChatThreadCreate(
            title=title, supp_id=supp_id, default_options=default_options
        ).to_body()
        return await self._api.request("POST", "/chat/threads", json=payload)

    async def list_threads(
        self,
        supp_id: Optional[str] = None,
        limit: Optional[int] = None,
        next_page_token: Optional[str] = None,
    ) -> dict[str, Any]:
        """List chat threads; returns "threads" and an optional "next_page_token"."""
        return await self._api.request(
            "GET",
            "/chat/threads",
            params={
                "supp_id": supp_id,
                "limit": limit,
                "next_page_token": next_page_token,
            },
        )

    async def get_thread(self, thread_id: str) -> dict[str, Any]:
        return await self._api.request("GET", f"/chat/threads/{thread_id}")

    async def update_thread(
        self,
        thread_id: str,
        title: Optional[str] = None,
        supp_id: Optional[str] = None,
        default_options: Optional[ChatThreadDefaultOptions] = None,
    ) -> dict[str, Any]:
        payload = ChatThreadUpdate(
            title=title, supp_id=supp_id, default_options=default_options
        ).to_body()
        return await self._api.request(
            "PATCH", f"/chat/threads/{thread_id}", json=payload
        )

    async def delete_thread(self, thread_id: str) -> None:
        await self._api.request("DELETE", f"/chat/threads/{thread_id}")

    # =========================================================================
    # Responses
    # =========================================================================

    async def get_response(
        self,
        thread_id: str,
        input: str,
        knowledge_base_ids: Optional[list[str]] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        use_rse: Optional[bool] = None,
        segment_length: Optional[SegmentLength] = None,
        response_length: Optional[ResponseLength] = None,
        system_message: Optional[str] = None,
        auto_query_guidance: Optional[str] = None,
        json_response: Optional[bool] = None,
        use_web_search: Optional[bool] = None,
        web_search_config: Optional[WebSearchConfig] = None,
        is_async: Optional[bool] = None,
    ) -> dict[str, Any]:
        """
        Send a message to a chat thread and get the model's response.

        Options left as None fall back to the thread's default options.

        Args:
            thread_id: Chat thread id
            input: User message
            is_async: Run as a background job and return its status

        Returns:
            Chat response with the interaction, search queries and ranked
            results, or an async job description when is_async is set
        """
        payload = ChatRequest(
            input=input,
            knowledge_base_ids=knowledge_base_ids,
            model=model,
            temperature=temperature,
            use_rse=use_rse,
            segment_length=segment_length,
            response_length=response_length,
            system_message=system_message,
            auto_query_guidance=auto_query_guidance,
            json_response=json_response,
            use_web_search=use_web_search,
            web_search_config=web_search_config,
            is_async=is_async,
        ).to_body()
        return await self._api.request(
            "POST", f"/chat/threads/{thread_id}/get_response", json=payload
        )

    async def list_interactions(
        self,
        thread_id: str,
        limit: Optional[int] = None,
        next_page_token: Optional[str] = None,
        order: Optional[InteractionOrder] = None,
    ) -> dict[str, Any]:
        """
        List interactions of a chat thread.

        Args:
            thread_id: Chat thread id
            limit: Maximum interactions to return
            next_page_token: Token from a previous page
            order: "asc" or "desc" by timestamp

        Returns:
            Dict with "interactions" and an optional "next_page_token"
        """
        if order is not None and order not in ("asc", "desc"):
            raise ValueError(f"order must be 'asc' or 'desc', got {order!r}")
        return await self._api.request(
            "GET",
            f"/chat/threads/{thread_id}/interactions",
            params={"limit": limit, "next_page_token": next_page_token, "order": order},
        )
