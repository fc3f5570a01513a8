"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from threadtree.application.usecase.thread import (
    ClearCommentsResponse,
    ClearCommentsUseCase,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentResponse,
    EditCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    GetCountResponse,
    GetCountUseCase,
    GetThreadViewRequest,
    GetThreadViewResponse,
    GetThreadViewUseCase,
    SetSearchQueryRequest,
    SetSearchQueryResponse,
    SetSearchQueryUseCase,
    SetSortOrderRequest,
    SetSortOrderResponse,
    SetSortOrderUseCase,
    ToggleCollapseRequest,
    ToggleCollapseResponse,
    ToggleCollapseUseCase,
    VoteCommentRequest,
    VoteCommentResponse,
    VoteCommentUseCase,
)
from threadtree.domain.error import DomainError
from threadtree.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request for posting a comment or reply."""

    text: str
    author: str | None = None


class EditCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    text: str


class VoteAPIRequest(BaseModel):
    """API request for voting."""

    delta: int = 1


class CollapseAPIRequest(BaseModel):
    """API request for collapsing or expanding replies."""

    collapsed: bool | None = None


@router.get("", response_model=GetThreadViewResponse)
async def get_thread_view(
    use_case: FromDishka[GetThreadViewUseCase],
    q: str | None = None,
) -> GetThreadViewResponse:
    """Get the render view of the whole thread.

    Args:
        use_case: Get thread view use case from DI
        q: Search query; omitted uses the query set via PUT /comments/search

    Returns:
        Rows in render order with their depth, plus the total count
    """
    return await use_case.execute(GetThreadViewRequest(query=q))


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    request: CommentAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Post a top-level comment.

    Raises:
        HTTPException: 400 if the text is blank
    """
    try:
        return await use_case.execute(
            CreateCommentRequest(text=request.text, author=request.author)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("", response_model=ClearCommentsResponse)
async def clear_comments(
    use_case: FromDishka[ClearCommentsUseCase],
) -> ClearCommentsResponse:
    """Delete every comment."""
    try:
        return await use_case.execute()
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/count", response_model=GetCountResponse)
async def get_count(use_case: FromDishka[GetCountUseCase]) -> GetCountResponse:
    """Count comments at every depth."""
    return await use_case.execute()


@router.put("/order", response_model=SetSortOrderResponse)
async def set_sort_order(
    request: SetSortOrderRequest,
    use_case: FromDishka[SetSortOrderUseCase],
) -> SetSortOrderResponse:
    """Reorder the thread (newest, oldest or top).

    Unknown orders are accepted and ignored; ``applied`` reports which.
    """
    try:
        return await use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/search", response_model=SetSearchQueryResponse)
async def set_search_query(
    request: SetSearchQueryRequest,
    use_case: FromDishka[SetSearchQueryUseCase],
) -> SetSearchQueryResponse:
    """Set the search query applied to later views."""
    return await use_case.execute(request)


@router.get("/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: str,
    use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get a single comment.

    Raises:
        HTTPException: 404 if the comment does not exist
    """
    try:
        return await use_case.execute(GetCommentRequest(comment_id=comment_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/{comment_id}/replies",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    comment_id: str,
    request: CommentAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Reply to a comment.

    Raises:
        HTTPException: 400 if the text is blank, 404 if the parent does not
            exist, 409 if the reply would nest too deeply
    """
    try:
        return await use_case.execute(
            CreateCommentRequest(
                text=request.text, author=request.author, parent_id=comment_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{comment_id}", response_model=EditCommentResponse)
async def edit_comment(
    comment_id: str,
    request: EditCommentAPIRequest,
    use_case: FromDishka[EditCommentUseCase],
) -> EditCommentResponse:
    """Edit a comment's text.

    Raises:
        HTTPException: 400 if the text is blank, 404 if the comment does not
            exist
    """
    try:
        return await use_case.execute(
            EditCommentRequest(comment_id=comment_id, text=request.text)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Delete a comment and all of its replies.

    Raises:
        HTTPException: 404 if the comment does not exist
    """
    try:
        return await use_case.execute(DeleteCommentRequest(comment_id=comment_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{comment_id}/vote", response_model=VoteCommentResponse)
async def vote_comment(
    comment_id: str,
    request: VoteAPIRequest,
    use_case: FromDishka[VoteCommentUseCase],
) -> VoteCommentResponse:
    """Add ``delta`` votes to a comment.

    Raises:
        HTTPException: 404 if the comment does not exist
    """
    try:
        return await use_case.execute(
            VoteCommentRequest(comment_id=comment_id, delta=request.delta)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{comment_id}/collapse", response_model=ToggleCollapseResponse)
async def toggle_collapse(
    comment_id: str,
    request: CollapseAPIRequest,
    use_case: FromDishka[ToggleCollapseUseCase],
) -> ToggleCollapseResponse:
    """Collapse or expand a comment's replies; no value flips the state.

    Raises:
        HTTPException: 404 if the comment does not exist
    """
    try:
        return await use_case.execute(
            ToggleCollapseRequest(comment_id=comment_id, collapsed=request.collapsed)
        )
    except DomainError as e:
        raise to_http_exception(e)
