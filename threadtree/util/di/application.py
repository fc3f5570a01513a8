"""Application layer DI providers."""

from dishka import Scope, provide

from threadtree.application.usecase.thread import (
    ClearCommentsUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    GetCommentUseCase,
    GetCountUseCase,
    GetThreadViewUseCase,
    SetSearchQueryUseCase,
    SetSortOrderUseCase,
    ToggleCollapseUseCase,
    VoteCommentUseCase,
)
from threadtree.domain.service import ThreadService
from threadtree.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_create_comment_use_case(
        self, thread_service: ThreadService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(thread_service=thread_service)

    @provide
    def get_edit_comment_use_case(
        self, thread_service: ThreadService
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(thread_service=thread_service)

    @provide
    def get_delete_comment_use_case(
        self, thread_service: ThreadService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(thread_service=thread_service)

    @provide
    def get_vote_comment_use_case(
        self, thread_service: ThreadService
    ) -> VoteCommentUseCase:
        """Provide vote comment use case."""
        return VoteCommentUseCase(thread_service=thread_service)

    @provide
    def get_toggle_collapse_use_case(
        self, thread_service: ThreadService
    ) -> ToggleCollapseUseCase:
        """Provide toggle collapse use case."""
        return ToggleCollapseUseCase(thread_service=thread_service)

    @provide
    def get_set_sort_order_use_case(
        self, thread_service: ThreadService
    ) -> SetSortOrderUseCase:
        """Provide set sort order use case."""
        return SetSortOrderUseCase(thread_service=thread_service)

    @provide
    def get_set_search_query_use_case(
        self, thread_service: ThreadService
    ) -> SetSearchQueryUseCase:
        """Provide set search query use case."""
        return SetSearchQueryUseCase(thread_service=thread_service)

    @provide
    def get_clear_comments_use_case(
        self, thread_service: ThreadService
    ) -> ClearCommentsUseCase:
        """Provide clear comments use case."""
        return ClearCommentsUseCase(thread_service=thread_service)

    @provide
    def get_count_use_case(self, thread_service: ThreadService) -> GetCountUseCase:
        """Provide get count use case."""
        return GetCountUseCase(thread_service=thread_service)

    @provide
    def get_comment_use_case(
        self, thread_service: ThreadService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(thread_service=thread_service)

    @provide
    def get_thread_view_use_case(
        self, thread_service: ThreadService
    ) -> GetThreadViewUseCase:
        """Provide get thread view use case."""
        return GetThreadViewUseCase(thread_service=thread_service)
