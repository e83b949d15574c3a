"""Tests for chat thread endpoints."""

import pytest
from pydantic import ValidationError

from superpowered import ChatThreadDefaultOptions

from helpers import BASE_URL

THREADS_URL = f"{BASE_URL}/chat/threads"


class TestChatAPI:
    """Tests for ChatAPI."""

    @pytest.mark.asyncio
    async def test_create_thread(self, client, mock_service):
        mock_service.add("POST", THREADS_URL, json={"id": "th_1"})

        thread = await client.chat.create_thread(
            title="Questions",
            default_options=ChatThreadDefaultOptions(
                knowledge_base_ids=["kb_1"], model="gpt-4o", use_rse=True
            ),
        )

        assert thread["id"] == "th_1"
        assert mock_service.json_body(mock_service.requests[0]) == {
            "title": "Questions",
            "default_options": {
                "knowledge_base_ids": ["kb_1"],
                "model": "gpt-4o",
                "use_rse": True,
            },
        }

    @pytest.mark.asyncio
    async def test_list_get_update_delete(self, client, mock_service):
        mock_service.add("GET", THREADS_URL, json={"threads": []})
        mock_service.add("GET", f"{THREADS_URL}/th_1", json={"id": "th_1"})
        mock_service.add("PATCH", f"{THREADS_URL}/th_1", json={"id": "th_1"})
        mock_service.add("DELETE", f"{THREADS_URL}/th_1", status=204)

        await client.chat.list_threads(supp_id="s1", limit=3)
        await client.chat.get_thread("th_1")
        await client.chat.update_thread("th_1", title="Renamed")
        await client.chat.delete_thread("th_1")

        listing, get, patch, delete = mock_service.requests
        assert dict(listing.url.params) == {"supp_id": "s1", "limit": "3"}
        assert mock_service.json_body(patch) == {"title": "Renamed"}
        assert delete.method == "DELETE"

    @pytest.mark.asyncio
    async def test_get_response(self, client, mock_service):
        """Test that only set options are sent and async is aliased."""
        mock_service.add(
            "POST",
            f"{THREADS_URL}/th_1/get_response",
            json={"interaction": {"model_response": {"content": "Answer"}}},
        )

        data = await client.chat.get_response(
            "th_1", "What is the policy?", response_length="short", is_async=False
        )

        assert data["interaction"]["model_response"]["content"] == "Answer"
        assert mock_service.json_body(mock_service.requests[0]) == {
            "input": "What is the policy?",
            "response_length": "short",
            "async": False,
        }

    @pytest.mark.asyncio
    async def test_get_response_rejects_bad_option(self, client, mock_service):
        with pytest.raises(ValidationError):
            await client.chat.get_response("th_1", "hi", segment_length="huge")
        assert mock_service.requests == []

    @pytest.mark.asyncio
    async def test_list_interactions(self, client, mock_service):
        mock_service.add("GET", f"{THREADS_URL}/th_1/interactions", json={"interactions": []})

        await client.chat.list_interactions("th_1", limit=20, order="desc")

        assert dict(mock_service.requests[0].url.params) == {"limit": "20", "order": "desc"}

    @pytest.mark.asyncio
    async def test_list_interactions_rejects_bad_order(self, client, mock_service):
        with pytest.raises(ValueError):
            await client.chat.list_interactions("th_1", order="newest")
        assert mock_service.requests == []
