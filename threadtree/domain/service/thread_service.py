"""Thread domain service.

Owns the in-memory comment forest. Every operation locates its target with
the shared tree locator, mutates the forest in place, and writes the whole
forest back through the repository before returning. Rejected operations
leave the forest untouched and never write.
"""

import asyncio
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import logfire

from threadtree.config import ThreadSettings
from threadtree.domain.error import (
    DepthExceededError,
    EmptyTextError,
    NotFoundError,
    ParentNotFoundError,
    PersistenceUnavailableError,
)
from threadtree.domain.model import CommentNode, Forest, ThreadView, utcnow
from threadtree.domain.repository import ForestRepository
from threadtree.domain.tree import (
    contains,
    count as count_nodes,
    filter_forest,
    find,
    find_container,
    find_with_depth,
    flatten_for_render,
    iter_preorder,
    sort_in_place,
)
from threadtree.domain.value import CommentId, SortOrder, new_comment_id


class ThreadService:
    """Domain service for the comment forest.

    One instance holds the forest for the life of the process. A single lock
    is held for the whole of each operation, covering both the in-memory
    work and the save, so no caller ever sees a half-applied mutation.
    """

    def __init__(
        self,
        forest_repository: ForestRepository,
        settings: ThreadSettings,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize thread service.

        Args:
            forest_repository: Persistence gateway for the forest
            settings: Thread settings (max depth, default author, order)
            clock: Source of timestamps for new comments and edits
        """
        self.forest_repository = forest_repository
        self.settings = settings
        self._clock = clock
        self._forest: Forest = []
        self._lock = asyncio.Lock()
        self._opened = False
        self.search_query = ""
        self.sort_order: Optional[SortOrder] = settings.default_order

    @property
    def forest(self) -> Forest:
        """The live forest. Callers must not mutate it directly."""
        return self._forest

    async def open(self) -> None:
        """Load the forest from the repository.

        Operations open the service on first use, so calling this is only
        needed to load eagerly.
        """
        async with self._guard():
            pass

    async def close(self) -> None:
        """Write the forest one last time."""
        async with self._lock:
            if not self._opened:
                return
            with logfire.span(
                "thread_service.close", count=count_nodes(self._forest)
            ):
                await self.forest_repository.save(self._forest)

    async def add_root(self, text: str, author: str | None = None) -> CommentNode:
        """Append a top-level comment.

        Args:
            text: Comment text (trimmed)
            author: Display name; blank or missing uses the default author

        Returns:
            The created comment

        Raises:
            EmptyTextError: If the text is blank
        """
        with logfire.span("thread_service.add_root", author=author):
            body = self._clean_text(text)
            async with self._guard():
                node = self._new_node(body, author)
                self._forest.append(node)
                await self._save(undo=self._forest.pop)
            logfire.info("Comment created", comment_id=node.id, depth=0)
            return node

    async def add_reply(
        self, parent_id: CommentId, text: str, author: str | None = None
    ) -> CommentNode:
        """Append a reply to the end of a comment's replies.

        Args:
            parent_id: Comment being replied to
            text: Reply text (trimmed)
            author: Display name; blank or missing uses the default author

        Returns:
            The created reply

        Raises:
            EmptyTextError: If the text is blank
            ParentNotFoundError: If the parent is not in the forest
            DepthExceededError: If the reply would be deeper than max_depth
        """
        with logfire.span(
            "thread_service.add_reply", parent_id=parent_id, author=author
        ):
            body = self._clean_text(text)
            async with self._guard():
                found = find_with_depth(self._forest, parent_id)
                if found is None:
                    logfire.warn("Parent comment not found", parent_id=parent_id)
                    raise ParentNotFoundError(parent_id)
                parent, parent_depth = found

                depth = parent_depth + 1
                max_depth = self.settings.max_depth
                if max_depth is not None and depth > max_depth:
                    logfire.warn(
                        "Reply depth exceeds maximum",
                        parent_id=parent_id,
                        depth=depth,
                        max_depth=max_depth,
                    )
                    raise DepthExceededError(depth, max_depth)

                node = self._new_node(body, author)
                parent.replies.append(node)
                await self._save(undo=parent.replies.pop)
            logfire.info(
                "Reply created", comment_id=node.id, parent_id=parent_id, depth=depth
            )
            return node

    async def edit(self, comment_id: CommentId, text: str) -> CommentNode:
        """Replace a comment's text.

        The edit is recorded even when the new text equals the old one.

        Raises:
            EmptyTextError: If the new text is blank
            NotFoundError: If the comment is not in the forest
        """
        with logfire.span("thread_service.edit", comment_id=comment_id):
            body = self._clean_text(text)
            async with self._guard():
                node = self._require(comment_id)
                previous = (node.text, node.edited, node.edited_at)
                node.apply_edit(body, self._clock())

                def undo() -> None:
                    node.text, node.edited, node.edited_at = previous

                await self._save(undo=undo)
            logfire.info(
                "Comment text updated", comment_id=comment_id, text_length=len(body)
            )
            return node

    async def delete(self, comment_id: CommentId) -> CommentNode:
        """Remove a comment together with all of its replies.

        Returns:
            The removed comment (its subtree is still attached to it)

        Raises:
            NotFoundError: If the comment is not in the forest
        """
        with logfire.span("thread_service.delete", comment_id=comment_id):
            async with self._guard():
                slot = find_container(self._forest, comment_id)
                if slot is None:
                    logfire.warn(
                        "Comment not found for delete", comment_id=comment_id
                    )
                    raise NotFoundError("Comment", comment_id)
                container, index = slot
                removed = container.pop(index)
                await self._save(undo=lambda: container.insert(index, removed))
            logfire.info(
                "Comment deleted",
                comment_id=comment_id,
                removed=count_nodes([removed]),
            )
            return removed

    async def vote(self, comment_id: CommentId, delta: int) -> CommentNode:
        """Add ``delta`` to a comment's votes. Negative totals are allowed.

        Raises:
            NotFoundError: If the comment is not in the forest
        """
        with logfire.span("thread_service.vote", comment_id=comment_id, delta=delta):
            async with self._guard():
                node = self._require(comment_id)
                previous = node.votes
                node.votes += delta
                await self._save(undo=lambda: setattr(node, "votes", previous))
            logfire.info("Comment voted", comment_id=comment_id, votes=node.votes)
            return node

    async def toggle_collapse(
        self, comment_id: CommentId, collapsed: bool | None = None
    ) -> CommentNode:
        """Set or flip a comment's collapsed flag.

        Args:
            comment_id: Comment ID
            collapsed: Value to set; None flips the current value

        Raises:
            NotFoundError: If the comment is not in the forest
        """
        with logfire.span("thread_service.toggle_collapse", comment_id=comment_id):
            async with self._guard():
                node = self._require(comment_id)
                previous = node.collapsed
                node.collapsed = not previous if collapsed is None else collapsed
                await self._save(undo=lambda: setattr(node, "collapsed", previous))
            logfire.info(
                "Comment collapse toggled",
                comment_id=comment_id,
                collapsed=node.collapsed,
            )
            return node

    async def clear_all(self) -> None:
        """Remove every comment."""
        with logfire.span("thread_service.clear_all"):
            async with self._guard():
                removed = count_nodes(self._forest)
                previous = list(self._forest)
                self._forest.clear()
                await self._save(undo=lambda: self._forest.extend(previous))
            logfire.info("All comments cleared", removed=removed)

    async def sort(self, order: SortOrder | str) -> bool:
        """Reorder every sibling group of the stored forest.

        Returns:
            False if ``order`` is not a known order; nothing changes then
        """
        with logfire.span("thread_service.sort", order=str(order)):
            try:
                order = SortOrder(order)
            except ValueError:
                logfire.warn("Unknown sort order ignored", order=str(order))
                return False
            async with self._guard():
                orders = _sibling_orders(self._forest)
                sort_in_place(self._forest, order)
                await self._save(undo=lambda: _restore_orders(orders))
                self.sort_order = order
            logfire.info("Comments sorted", order=order.value)
            return True

    async def set_search_query(self, query: str) -> None:
        """Remember the active search query for later views."""
        with logfire.span("thread_service.set_search_query", query=query):
            async with self._guard():
                self.search_query = query
            logfire.info("Search query set", query=query)

    async def get_comment(self, comment_id: CommentId) -> CommentNode:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment is not in the forest
        """
        async with self._guard():
            return self._require(comment_id)

    async def count(self) -> int:
        """Number of comments at every depth."""
        async with self._guard():
            return count_nodes(self._forest)

    async def view(self, query: str | None = None) -> ThreadView:
        """Build the render view.

        Args:
            query: Search query; None uses the remembered query

        Returns:
            Flattened rows of the (filtered) forest and the total count
        """
        with logfire.span("thread_service.view"):
            async with self._guard():
                active = self.search_query if query is None else query
                items = flatten_for_render(filter_forest(self._forest, active))
                total = count_nodes(self._forest)
            logfire.info("Thread view built", rows=len(items), count=total)
            return ThreadView(
                items=items, count=total, query=active, order=self.sort_order
            )

    @asynccontextmanager
    async def _guard(self) -> AsyncIterator[None]:
        """Hold the forest lock, loading the forest on first use."""
        async with self._lock:
            if not self._opened:
                await self._load()
            yield

    async def _load(self) -> None:
        with logfire.span("thread_service.load"):
            self._forest = await self.forest_repository.load()
            if self.sort_order is not None:
                sort_in_place(self._forest, self.sort_order)
            self._opened = True
            logfire.info("Comment forest loaded", count=count_nodes(self._forest))

    async def _save(self, undo: Callable[[], object]) -> None:
        """Write the forest, reverting the mutation just made if that fails."""
        try:
            await self.forest_repository.save(self._forest)
        except PersistenceUnavailableError as e:
            undo()
            logfire.error("Forest save failed, mutation rolled back", error=str(e))
            raise

    def _require(self, comment_id: CommentId) -> CommentNode:
        node = find(self._forest, comment_id)
        if node is None:
            logfire.warn("Comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", comment_id)
        return node

    def _new_node(self, text: str, author: str | None) -> CommentNode:
        comment_id = new_comment_id()
        while contains(self._forest, comment_id):
            comment_id = new_comment_id()
        return CommentNode(
            id=comment_id,
            text=text,
            author=(author or "").strip() or self.settings.default_author,
            created_at=self._clock(),
        )

    @staticmethod
    def _clean_text(text: str) -> str:
        body = text.strip()
        if not body:
            raise EmptyTextError()
        return body


def _sibling_orders(forest: Forest) -> list[tuple[Forest, Forest]]:
    """Copy the order of every sibling group, the roots included."""
    orders = [(forest, list(forest))]
    for node, _ in iter_preorder(forest):
        if node.replies:
            orders.append((node.replies, list(node.replies)))
    return orders


def _restore_orders(orders: list[tuple[Forest, Forest]]) -> None:
    for siblings, previous in orders:
        siblings[:] = previous
