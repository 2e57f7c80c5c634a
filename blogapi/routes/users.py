from fastapi import APIRouter, HTTPException
from typing import List
from ..schemas.users import UserIn, UserOut, ActionOkOut
from ..schemas.posts import PostOut, PostWithCommentsOut
from ..crud import (
    create_user,
    list_users,
    get_user_by_id,
    get_user_with_posts,
    delete_user_cascade,
    get_post_with_comments,
)

router = APIRouter()


@router.post('/', response_model=UserOut, summary='Create a new user')
async def create(payload: UserIn):
    """Any `id` in the body is ignored; the store assigns one."""
    return await create_user(payload)


@router.get('/', response_model=List[UserOut], summary='Get all users')
async def list_all():
    return await list_users()


@router.get('/{user_id}', response_model=UserOut, summary='Get user by ID')
async def get(user_id: int):
    user = await get_user_by_id(user_id)
    if not user:
        raise HTTPException(404, 'User not found')
    return user


@router.get('/{user_id}/posts', response_model=List[PostOut], summary='Get posts by user ID')
async def posts(user_id: int):
    user = await get_user_with_posts(user_id)
    if not user:
        raise HTTPException(404, 'User not found')
    return user.posts


@router.get(
    '/{post_id}/comments',
    response_model=PostWithCommentsOut,
    summary='Get a post with its comments (legacy path)',
    deprecated=True,
)
async def legacy_post_comments(post_id: int):
    """Kept for clients of the old URL; the id is a post id. Use `GET /posts/{id}/comments`.

    Only the path is preserved: the body is this API's post shape and errors
    use the `{"detail": ...}` envelope, not the bare JSON strings older clients
    received, and users/posts no longer carry empty `posts`/`comments` keys.
    """
    post = await get_post_with_comments(post_id)
    if not post:
        raise HTTPException(404, 'Post not found')
    return post


@router.delete('/{user_id}', response_model=ActionOkOut, summary='Delete user by ID')
async def remove(user_id: int):
    """Delete a user together with its posts and their comments, atomically."""
    deleted = await delete_user_cascade(user_id)
    if deleted is None:
        raise HTTPException(404, 'User not found')
    return ActionOkOut(message='User and associated data deleted successfully')
