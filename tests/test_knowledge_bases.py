"""Tests for knowledge base endpoints."""

import pytest
from pydantic import ValidationError

from superpowered import APIError, SummaryConfig, WebSearchConfig

from helpers import BASE_URL

KB_URL = f"{BASE_URL}/knowledge_bases"


class TestKnowledgeBaseAPI:
    """Tests for KnowledgeBaseAPI."""

    @pytest.mark.asyncio
    async def test_list_with_filters(self, client, mock_service):
        mock_service.add("GET", KB_URL, json={"knowledge_bases": [{"id": "kb_1"}]})

        data = await client.knowledge_bases.list_knowledge_bases(limit=10, title_begins_with="Hand")

        assert data["knowledge_bases"][0]["id"] == "kb_1"
        params = mock_service.requests[0].url.params
        assert dict(params) == {"limit": "10", "title_begins_with": "Hand"}

    @pytest.mark.asyncio
    async def test_create(self, client, mock_service):
        """Test that unset fields are left out of the body."""
        mock_service.add("POST", KB_URL, json={"id": "kb_1", "title": "Handbook"})

        kb = await client.knowledge_bases.create_knowledge_base("Handbook", description="HR docs")

        assert kb["id"] == "kb_1"
        assert mock_service.json_body(mock_service.requests[0]) == {
            "title": "Handbook",
            "description": "HR docs",
        }

    @pytest.mark.asyncio
    async def test_get_update_delete(self, client, mock_service):
        mock_service.add("GET", f"{KB_URL}/kb_1", json={"id": "kb_1"})
        mock_service.add("PATCH", f"{KB_URL}/kb_1", json={"id": "kb_1", "supp_id": "x"})
        mock_service.add("DELETE", f"{KB_URL}/kb_1", status=204)

        assert (await client.knowledge_bases.get_knowledge_base("kb_1"))["id"] == "kb_1"
        updated = await client.knowledge_bases.update_knowledge_base("kb_1", supp_id="x")
        assert updated["supp_id"] == "x"
        assert await client.knowledge_bases.delete_knowledge_base("kb_1") is None

        get, patch, delete = mock_service.requests
        assert mock_service.json_body(patch) == {"supp_id": "x"}
        assert delete.method == "DELETE"

    @pytest.mark.asyncio
    async def test_get_missing(self, client, mock_service):
        mock_service.add("GET", f"{KB_URL}/nope", status=404, json={"error": "Knowledge base not found"})

        with pytest.raises(APIError) as exc_info:
            await client.knowledge_bases.get_knowledge_base("nope")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_query(self, client, mock_service):
        """Test the query body, including nested configs and the async flag."""
        mock_service.add("POST", f"{KB_URL}/query", json={"ranked_results": []})

        await client.knowledge_bases.query_knowledge_bases(
            "vacation policy",
            ["kb_1", "kb_2"],
            top_k=5,
            summarize_results=True,
            summary_config=SummaryConfig(system_message="Be brief"),
            segment_length="medium",
            summary_system_message="Answer in French",
            web_search_config=WebSearchConfig(include_domains=["example.com"]),
            is_async=True,
        )

        assert mock_service.json_body(mock_service.requests[0]) == {
            "query": "vacation policy",
            "knowledge_base_ids": ["kb_1", "kb_2"],
            "top_k": 5,
            "summarize_results": True,
            "summary_config": {"system_message": "Be brief"},
            "segment_length": "medium",
            "summary_system_message": "Answer in French",
            "web_search_config": {"include_domains": ["example.com"]},
            "async": True,
        }

    @pytest.mark.asyncio
    async def test_query_rejects_very_short_segments(self, client, mock_service):
        """Test that queries only accept short, medium or long segments."""
        with pytest.raises(ValidationError):
            await client.knowledge_bases.query_knowledge_bases(
                "vacation policy", ["kb_1"], segment_length="very_short"
            )

        assert mock_service.requests == []
