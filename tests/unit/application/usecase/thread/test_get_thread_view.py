"""Unit tests for the thread view, search and ordering use cases."""

from dishka import AsyncContainer
import pytest

from threadtree.application.usecase.thread import (
    GetThreadViewRequest,
    GetThreadViewUseCase,
    SetSearchQueryRequest,
    SetSearchQueryUseCase,
    SetSortOrderRequest,
    SetSortOrderUseCase,
)
from threadtree.domain.service import ThreadService
from threadtree.domain.value import SortOrder
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetThreadViewUseCase:
    """Tests for GetThreadViewUseCase."""

    @pytest.mark.asyncio
    async def test_rows_in_preorder_with_depth(self, unit_env: AsyncContainer):
        """Should flatten the forest depth-first with each row's depth."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        use_case = await unit_env.get(GetThreadViewUseCase)
        a = await thread_service.add_root("A")
        b = await thread_service.add_reply(a.id, "B")
        c = await thread_service.add_reply(b.id, "C")
        d = await thread_service.add_root("D")

        # Act
        response = await use_case.execute(GetThreadViewRequest())

        # Assert
        assert [row.comment_id for row in response.rows] == [a.id, b.id, c.id, d.id]
        assert [row.depth for row in response.rows] == [0, 1, 2, 0]
        assert response.count == 4
        assert response.query == ""
        assert response.order is None

    @pytest.mark.asyncio
    async def test_collapsed_rows_hide_replies(self, unit_env: AsyncContainer):
        """Should show a collapsed comment but none of its replies."""
        thread_service = await unit_env.get(ThreadService)
        use_case = await unit_env.get(GetThreadViewUseCase)
        a = await thread_service.add_root("A")
        await thread_service.add_reply(a.id, "B")
        await thread_service.toggle_collapse(a.id)

        response = await use_case.execute(GetThreadViewRequest())

        assert [row.comment_id for row in response.rows] == [a.id]
        assert response.rows[0].collapsed is True
        assert response.rows[0].reply_count == 1
        assert response.count == 2

    @pytest.mark.asyncio
    async def test_query_keeps_matches_and_ancestors(self, unit_env: AsyncContainer):
        """Should keep matching comments with the path leading to them."""
        thread_service = await unit_env.get(ThreadService)
        use_case = await unit_env.get(GetThreadViewUseCase)
        a = await thread_service.add_root("Hello")
        b = await thread_service.add_reply(a.id, "World")
        await thread_service.add_root("Unrelated")

        response = await use_case.execute(GetThreadViewRequest(query="world"))

        assert [row.comment_id for row in response.rows] == [a.id, b.id]
        assert response.count == 3
        assert response.query == "world"


class TestSearchAndOrder:
    """Tests for SetSearchQueryUseCase and SetSortOrderUseCase."""

    @pytest.mark.asyncio
    async def test_search_query_is_remembered(self, unit_env: AsyncContainer):
        """Should apply the stored query to later views."""
        thread_service = await unit_env.get(ThreadService)
        search = await unit_env.get(SetSearchQueryUseCase)
        view = await unit_env.get(GetThreadViewUseCase)
        await thread_service.add_root("apples")
        pears = await thread_service.add_root("pears")

        await search.execute(SetSearchQueryRequest(query="PEAR"))
        response = await view.execute(GetThreadViewRequest())

        assert [row.comment_id for row in response.rows] == [pears.id]
        assert response.query == "PEAR"

    @pytest.mark.asyncio
    async def test_sort_top(self, unit_env: AsyncContainer):
        """Should put the most voted comment first."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        sort = await unit_env.get(SetSortOrderUseCase)
        view = await unit_env.get(GetThreadViewUseCase)
        first = await thread_service.add_root("first")
        second = await thread_service.add_root("second")
        await thread_service.vote(second.id, 2)

        # Act
        response = await sort.execute(SetSortOrderRequest(order="top"))
        rows = (await view.execute(GetThreadViewRequest())).rows

        # Assert
        assert response.applied is True
        assert response.order == SortOrder.TOP
        assert [row.comment_id for row in rows] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_unknown_order_is_not_applied(self, unit_env: AsyncContainer):
        """Should report unknown orders and keep the current one."""
        thread_service = await unit_env.get(ThreadService)
        sort = await unit_env.get(SetSortOrderUseCase)
        first = await thread_service.add_root("first")
        second = await thread_service.add_root("second")

        response = await sort.execute(SetSortOrderRequest(order="shuffle"))

        assert response.applied is False
        assert response.order is None
        assert [node.id for node in thread_service.forest] == [first.id, second.id]
