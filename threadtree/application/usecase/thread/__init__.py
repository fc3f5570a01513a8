"""Thread use cases."""

from .clear_comments import ClearCommentsResponse, ClearCommentsUseCase
from .common import CommentItem
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .edit_comment import EditCommentRequest, EditCommentResponse, EditCommentUseCase
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .get_count import GetCountResponse, GetCountUseCase
from .get_thread_view import (
    GetThreadViewRequest,
    GetThreadViewResponse,
    GetThreadViewUseCase,
    ThreadRow,
)
from .set_search_query import (
    SetSearchQueryRequest,
    SetSearchQueryResponse,
    SetSearchQueryUseCase,
)
from .set_sort_order import (
    SetSortOrderRequest,
    SetSortOrderResponse,
    SetSortOrderUseCase,
)
from .toggle_collapse import (
    ToggleCollapseRequest,
    ToggleCollapseResponse,
    ToggleCollapseUseCase,
)
from .vote_comment import VoteCommentRequest, VoteCommentResponse, VoteCommentUseCase

__all__ = [
    "ClearCommentsResponse",
    "ClearCommentsUseCase",
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "EditCommentRequest",
    "EditCommentResponse",
    "EditCommentUseCase",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "GetCountResponse",
    "GetCountUseCase",
    "GetThreadViewRequest",
    "GetThreadViewResponse",
    "GetThreadViewUseCase",
    "SetSearchQueryRequest",
    "SetSearchQueryResponse",
    "SetSearchQueryUseCase",
    "SetSortOrderRequest",
    "SetSortOrderResponse",
    "SetSortOrderUseCase",
    "ThreadRow",
    "ToggleCollapseRequest",
    "ToggleCollapseResponse",
    "ToggleCollapseUseCase",
    "VoteCommentRequest",
    "VoteCommentResponse",
    "VoteCommentUseCase",
]
