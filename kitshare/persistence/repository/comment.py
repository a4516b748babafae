"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from kitshare.domain.model import Comment
from kitshare.domain.repository.comment import CommentRepository
from kitshare.domain.value import CommentId, PostId
from kitshare.persistence.mappers import comment_to_dict, row_to_comment
from kitshare.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        with logfire.span("comment_repository.find_by_id", comment_id=str(comment_id)):
            stmt = select(comments_table).where(comments_table.c.id == comment_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, newest first."""
        with logfire.span("comment_repository.find_by_post", post_id=str(post_id)):
            stmt = (
                select(comments_table)
                .where(comments_table.c.post_id == post_id)
                .order_by(comments_table.c.created_at.desc(), comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            existing = await self.session.execute(
                select(comments_table.c.id).where(comments_table.c.id == comment.id)
            )
            comment_dict = comment_to_dict(comment)

            if existing.first():
                stmt = (
                    comments_table.update()
                    .where(comments_table.c.id == comment.id)
                    .values(
                        title=comment.title,
                        text=comment.text,
                        edited=comment.edited,
                        updated_at=comment.updated_at,
                    )
                )
            else:
                stmt = comments_table.insert().values(**comment_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        stmt = comments_table.delete().where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
