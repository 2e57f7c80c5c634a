from fastapi import APIRouter, HTTPException
from typing import List
from ..schemas.posts import PostIn, PostUpdateIn, PostOut, PostWithCommentsOut
from ..schemas.comments import CommentOut
from ..schemas.users import ActionOkOut
from ..crud import (
    create_post,
    get_user_by_id,
    get_post_by_id,
    get_post_with_comments,
    update_post,
    delete_post,
)

router = APIRouter()


@router.post('/', response_model=PostOut, summary='Create a new post')
async def create(payload: PostIn):
    if not await get_user_by_id(payload.user_id):
        raise HTTPException(400, 'Invalid userID')
    return await create_post(payload)


@router.get('/{post_id}', response_model=PostWithCommentsOut, summary='Get post by ID')
async def get(post_id: int):
    post = await get_post_with_comments(post_id)
    if not post:
        raise HTTPException(404, 'Post not found')
    return post


@router.get('/{post_id}/comments', response_model=List[CommentOut], summary='Get comments for a post')
async def comments(post_id: int):
    post = await get_post_with_comments(post_id)
    if not post:
        raise HTTPException(404, 'Post not found')
    return post.comments


@router.put('/{post_id}', response_model=PostOut, summary='Update a post by ID')
async def update(post_id: int, payload: PostUpdateIn):
    """Fields present in the body overwrite the stored ones; the id always comes from the path."""
    if not await get_post_by_id(post_id):
        raise HTTPException(404, 'Post not found')
    fields = payload.model_dump(exclude_unset=True)
    if fields.get('user_id') is not None and not await get_user_by_id(fields['user_id']):
        raise HTTPException(400, 'Invalid userID')
    # explicit nulls would violate NOT NULL columns
    fields = {k: v for k, v in fields.items() if v is not None}
    post = await update_post(post_id, fields)
    if not post:
        raise HTTPException(404, 'Post not found')
    return post


@router.delete('/{post_id}', response_model=ActionOkOut, summary='Delete post by ID')
async def remove(post_id: int):
    """Comments of the post are not deleted."""
    post = await delete_post(post_id)
    if not post:
        raise HTTPException(404, 'Post not found')
    return ActionOkOut(message='Post deleted successfully')
