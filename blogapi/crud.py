from .models import AsyncSessionLocal
from .models.users import User
from .models.posts import Post
from .models.comments import Comment
from sqlalchemy import select, delete
from sqlalchemy.orm import selectinload
import logging

logger = logging.getLogger(__name__)

# users
async def create_user(payload):
    async with AsyncSessionLocal() as session:
        user = User(name=payload.name, username=payload.username)
        session.add(user)
        await session.commit()
        await session.refresh(user)
        return user

async def list_users():
    async with AsyncSessionLocal() as session:
        res = await session.execute(select(User).order_by(User.id))
        return res.scalars().all()

async def get_user_by_id(user_id: int):
    async with AsyncSessionLocal() as session:
        q = await session.execute(select(User).where(User.id == user_id))
        return q.scalars().first()

async def get_user_with_posts(user_id: int):
    async with AsyncSessionLocal() as session:
        q = await session.execute(
            select(User).options(selectinload(User.posts)).where(User.id == user_id)
        )
        return q.scalars().first()

async def delete_user_cascade(user_id: int):
    """Delete a user, every post it owns and every comment under those posts.

    Runs in one transaction: comments first, then posts, then the user.
    Returns None if the user does not exist, otherwise the number of rows
    removed per table.
    """
    async with AsyncSessionLocal() as session:
        async with session.begin():
            q = await session.execute(
                select(User)
                .options(selectinload(User.posts).selectinload(Post.comments))
                .where(User.id == user_id)
            )
            user = q.scalars().first()
            if not user:
                return None

            post_ids = [p.id for p in user.posts]
            comment_ids = [c.id for p in user.posts for c in p.comments]
            if comment_ids:
                await session.execute(delete(Comment).where(Comment.id.in_(comment_ids)))
            if post_ids:
                await session.execute(delete(Post).where(Post.id.in_(post_ids)))
            await session.execute(delete(User).where(User.id == user_id))

    counts = {'users': 1, 'posts': len(post_ids), 'comments': len(comment_ids)}
    logger.info({'msg': 'user_cascade_deleted', 'user_id': user_id, **counts})
    return counts

# posts
async def create_post(payload):
    async with AsyncSessionLocal() as session:
        post = Post(title=payload.title, content=payload.content, user_id=payload.user_id)
        session.add(post)
        await session.commit()
        await session.refresh(post)
        return post

async def get_post_by_id(post_id: int):
    async with AsyncSessionLocal() as session:
        q = await session.execute(select(Post).where(Post.id == post_id))
        return q.scalars().first()

async def get_post_with_comments(post_id: int):
    async with AsyncSessionLocal() as session:
        q = await session.execute(
            select(Post).options(selectinload(Post.comments)).where(Post.id == post_id)
        )
        return q.scalars().first()

async def update_post(post_id: int, fields: dict):
    async with AsyncSessionLocal() as session:
        q = await session.execute(select(Post).where(Post.id == post_id))
        post = q.scalars().first()
        if not post:
            return None
        for key, value in fields.items():
            setattr(post, key, value)
        await session.commit()
        await session.refresh(post)
        return post

async def delete_post(post_id: int):
    # comments are left in place
    async with AsyncSessionLocal() as session:
        q = await session.execute(select(Post).where(Post.id == post_id))
        post = q.scalars().first()
        if not post:
            return None
        await session.delete(post)
        await session.commit()
        return post

# comments
async def create_comment(payload):
    async with AsyncSessionLocal() as session:
        c = Comment(text=payload.text, user_id=payload.user_id, post_id=payload.post_id)
        session.add(c)
        await session.commit()
        await session.refresh(c)
        return c

async def get_comment_by_id(comment_id: int):
    async with AsyncSessionLocal() as session:
        q = await session.execute(select(Comment).where(Comment.id == comment_id))
        return q.scalars().first()

async def replace_comment(comment_id: int, payload):
    """Overwrite every mutable field of an existing comment."""
    async with AsyncSessionLocal() as session:
        q = await session.execute(select(Comment).where(Comment.id == comment_id))
        c = q.scalars().first()
        if not c:
            return None
        c.text = payload.text
        c.user_id = payload.user_id
        c.post_id = payload.post_id
        await session.commit()
        await session.refresh(c)
        return c

async def delete_comment(comment_id: int):
    async with AsyncSessionLocal() as session:
        q = await session.execute(select(Comment).where(Comment.id == comment_id))
        c = q.scalars().first()
        if not c:
            return None
        await session.delete(c)
        await session.commit()
        return c
