"""End-to-end tests for the trending endpoints."""

from uuid import uuid4

import pytest

from promptu.domain.value import ContentType
from tests.conftest import make_item
from tests.harness import create_api_fixture, sign_token

# API test fixture - in-memory persistence behind the real app
api_env = create_api_fixture()


class TestTrendingEndpoint:
    """Tests for GET /trending."""

    @pytest.mark.asyncio
    async def test_returns_ranked_items_with_meta(self, api_env):
        # Arrange
        await api_env.seed(
            make_item("top-prompt", upvotes=10, views=100, copies=5),
            make_item("second-prompt", upvotes=2),
            make_item("third-prompt", views=3),
        )

        # Act
        response = await api_env.client.get(
            "/trending", params={"timeframe": "all-time", "limit": 2}
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [i["slug"] for i in body["data"]] == ["top-prompt", "second-prompt"]
        assert body["data"][0]["rank"] == 1
        assert body["data"][0]["score"] == 50.0
        assert body["data"][0]["has_voted"] is False
        assert body["meta"] == {
            "limit": 2,
            "timeframe": "all-time",
            "type": None,
            "category": None,
            "count": 2,
        }

    @pytest.mark.asyncio
    async def test_type_filter(self, api_env):
        await api_env.seed(
            make_item("user-prompt", upvotes=9),
            make_item("system-prompt", content_type=ContentType.SYSTEM, upvotes=1),
        )

        response = await api_env.client.get(
            "/trending", params={"timeframe": "all-time", "type": "system"}
        )

        assert response.status_code == 200
        assert [i["slug"] for i in response.json()["data"]] == ["system-prompt"]

    @pytest.mark.asyncio
    async def test_unknown_type_returns_empty_list(self, api_env):
        await api_env.seed(make_item("user-prompt", upvotes=9))

        response = await api_env.client.get("/trending", params={"type": "banana"})

        assert response.status_code == 200
        assert response.json()["data"] == []
        assert response.json()["meta"]["count"] == 0

    @pytest.mark.asyncio
    async def test_viewer_votes_are_marked(self, api_env):
        await api_env.seed(make_item("liked-prompt", upvotes=3))
        api_env.login(uuid4())
        await api_env.client.post("/items/liked-prompt/vote", json={})

        response = await api_env.client.get(
            "/trending", params={"timeframe": "all-time"}
        )

        assert response.json()["data"][0]["has_voted"] is True

    @pytest.mark.asyncio
    async def test_token_with_non_uuid_subject_reads_as_anonymous(self, api_env):
        await api_env.seed(make_item("liked-prompt", upvotes=3))
        api_env.client.cookies.set("auth_token", sign_token("not-a-uuid"))

        response = await api_env.client.get(
            "/trending", params={"timeframe": "all-time"}
        )

        assert response.status_code == 200
        assert response.json()["data"][0]["has_voted"] is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [{"limit": 0}, {"limit": -3}, {"limit": "abc"}, {"timeframe": "yearly"}],
    )
    async def test_invalid_query_returns_400(self, api_env, params):
        response = await api_env.client.get("/trending", params=params)

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_argument"


class TestHotItemsEndpoint:
    """Tests for GET /trending/hot."""

    @pytest.mark.asyncio
    async def test_empty_platform_has_no_hot_items(self, api_env):
        response = await api_env.client.get("/trending/hot")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    @pytest.mark.asyncio
    async def test_invalid_limit_returns_400(self, api_env):
        response = await api_env.client.get("/trending/hot", params={"limit": 0})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_malformed_limit_returns_invalid_argument(self, api_env):
        response = await api_env.client.get("/trending/hot", params={"limit": "abc"})

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_argument"
