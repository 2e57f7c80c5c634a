from fastapi import APIRouter, HTTPException
from ..schemas.comments import CommentIn, CommentOut
from ..crud import create_comment, get_comment_by_id, replace_comment, delete_comment

router = APIRouter()


@router.post('/', response_model=CommentOut, summary='Create a new comment')
async def create(payload: CommentIn):
    # the referenced post is not checked
    return await create_comment(payload)


@router.get('/{comment_id}', response_model=CommentOut, summary='Get comment by ID')
async def get(comment_id: int):
    c = await get_comment_by_id(comment_id)
    if not c:
        raise HTTPException(404, 'Comment not found')
    return c


@router.put('/{comment_id}', response_model=CommentOut, summary='Update comment by ID')
async def update(comment_id: int, payload: CommentIn):
    c = await replace_comment(comment_id, payload)
    if not c:
        raise HTTPException(404, 'Comment not found')
    return c


@router.delete('/{comment_id}', response_model=CommentOut, summary='Delete comment by ID')
async def remove(comment_id: int):
    c = await delete_comment(comment_id)
    if not c:
        raise HTTPException(404, 'Comment not found')
    return c
