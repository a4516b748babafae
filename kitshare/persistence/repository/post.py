"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from kitshare.domain.model import Post
from kitshare.domain.repository.post import PostRepository, PostSortOrder
from kitshare.domain.value import PostId, UserId
from kitshare.persistence.mappers import post_to_dict, row_to_post
from kitshare.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID, optionally locking its row."""
        with logfire.span(
            "post_repository.find_by_id", post_id=str(post_id), for_update=for_update
        ):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            if for_update:
                stmt = stmt.with_for_update()
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None
            return row_to_post(row._asdict())

    async def find_all(self, sort: PostSortOrder = PostSortOrder.POPULAR) -> List[Post]:
        """Find all posts in the requested order."""
        with logfire.span("post_repository.find_all", sort=sort.value):
            stmt = select(posts_table)
            if sort == PostSortOrder.POPULAR:
                stmt = stmt.order_by(
                    func.cardinality(posts_table.c.likes).desc(),
                    posts_table.c.created_at.desc(),
                    posts_table.c.id,
                )
            else:
                stmt = stmt.order_by(
                    posts_table.c.created_at.desc(), posts_table.c.id
                )

            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_by_creator(self, creator_id: UserId) -> List[Post]:
        """Find a user's posts, newest first."""
        with logfire.span(
            "post_repository.find_by_creator", creator_id=str(creator_id)
        ):
            stmt = (
                select(posts_table)
                .where(posts_table.c.creator_id == creator_id)
                .order_by(posts_table.c.created_at.desc(), posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            existing = await self.session.execute(
                select(posts_table.c.id).where(posts_table.c.id == post.id)
            )
            post_dict = post_to_dict(post)

            if existing.first():
                # creator_id and created_at never change after insert
                values = {
                    k: v
                    for k, v in post_dict.items()
                    if k not in ("id", "creator_id", "created_at")
                }
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**values)
                )
            else:
                logfire.info("Inserting new post", post_id=str(post.id))
                stmt = posts_table.insert().values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete). Comments go with it via the FK cascade."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()
