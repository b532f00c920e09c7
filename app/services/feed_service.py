"""Post listing, creation, likes and deletion."""
from sqlalchemy import delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.post import Post
from app.schemas.post import PostCreate


async def create_post(db: AsyncSession, user_id: int, data: PostCreate) -> Post:
    post = Post(
        user_id=user_id,
        title=data.title,
        content=data.content,
        likes=0,
    )
    db.add(post)
    await db.flush()
    await db.refresh(post)
    return post


async def get_feed_posts(db: AsyncSession) -> list[Post]:
    """All posts, newest first. Unpaginated."""
    result = await db.execute(
        select(Post)
        .order_by(desc(Post.timestamp), desc(Post.id))
        .options(selectinload(Post.user))
    )
    return list(result.scalars().all())


async def get_user_posts(db: AsyncSession, user_id: int) -> list[Post]:
    result = await db.execute(
        select(Post)
        .where(Post.user_id == user_id)
        .order_by(desc(Post.timestamp), desc(Post.id))
        .options(selectinload(Post.user))
    )
    return list(result.scalars().all())


async def like_post(db: AsyncSession, post_id: int, liker_id: int) -> bool:
    """Add one like unless the post is missing or belongs to the liker.

    Repeat likes by the same user are counted every time.
    """
    result = await db.execute(
        update(Post)
        .where(Post.id == post_id, Post.user_id != liker_id)
        .values(likes=Post.likes + 1)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount > 0


async def delete_post(db: AsyncSession, post_id: int, owner_id: int) -> bool:
    result = await db.execute(
        delete(Post)
        .where(Post.id == post_id, Post.user_id == owner_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount > 0
