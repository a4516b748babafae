"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from kitshare.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from kitshare.domain.repository import CommentRepository, PostRepository
from kitshare.domain.service import CommentService
from kitshare.domain.value import CommentId, PostId, UserId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_post(unit_env):
    post_repo = await unit_env.get(PostRepository)
    return await post_repo.save(make_post(UserId(uuid4())))


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_is_not_edited(self, unit_env):
        """A new comment is saved trimmed and unedited."""
        comment_service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)
        author = UserId(uuid4())

        comment = await comment_service.create_comment(
            author, post.id, " Snare tone ", "Tuned way up."
        )

        assert comment.title == "Snare tone"
        assert comment.text == "Tuned way up."
        assert comment.edited is False
        assert comment.creator_id == author
        assert await comment_service.list_for_post(post.id) == [comment]

    @pytest.mark.asyncio
    async def test_create_comment_requires_title_and_text(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)

        with pytest.raises(ValidationError, match="Title and text are required"):
            await comment_service.create_comment(UserId(uuid4()), post.id, "Hi", " ")

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_post_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.create_comment(
                UserId(uuid4()), PostId(uuid4()), "Title", "Text"
            )

        assert exc_info.value.resource == "Post"


class TestUpdateComment:
    """Tests for update_comment method."""

    @pytest.mark.asyncio
    async def test_edit_by_author_marks_edited(self, unit_env):
        """Editing only the text keeps the title and sets edited."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)
        author = UserId(uuid4())
        comment = await comment_repo.save(make_comment(post.id, author))

        updated = await comment_service.update_comment(
            author, comment.id, text="Actually a Pearl Free Floater."
        )

        assert updated.title == comment.title
        assert updated.text == "Actually a Pearl Free Floater."
        assert updated.edited is True

    @pytest.mark.asyncio
    async def test_edited_flag_never_resets(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)
        author = UserId(uuid4())
        comment = await comment_repo.save(make_comment(post.id, author))

        await comment_service.update_comment(author, comment.id, title="First")
        again = await comment_service.update_comment(author, comment.id, title="Second")

        assert again.edited is True
        assert (await comment_repo.find_by_id(comment.id)).title == "Second"

    @pytest.mark.asyncio
    async def test_edit_by_non_author_is_forbidden_and_changes_nothing(
        self, unit_env
    ):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)
        comment = await comment_repo.save(make_comment(post.id, UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await comment_service.update_comment(
                UserId(uuid4()), comment.id, text="Hijacked"
            )

        stored = await comment_repo.find_by_id(comment.id)
        assert stored == comment
        assert stored.edited is False

    @pytest.mark.asyncio
    async def test_edit_with_blank_text_is_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)
        author = UserId(uuid4())
        comment = await comment_repo.save(make_comment(post.id, author))

        with pytest.raises(ValidationError):
            await comment_service.update_comment(author, comment.id, text="")

        assert (await comment_repo.find_by_id(comment.id)).edited is False

    @pytest.mark.asyncio
    async def test_edit_missing_comment_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.update_comment(
                UserId(uuid4()), CommentId(uuid4()), text="x"
            )


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_by_author(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)
        author = UserId(uuid4())
        comment = await comment_repo.save(make_comment(post.id, author))

        await comment_service.delete_comment(str(author), comment.id)

        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_post_owner_cannot_delete_someone_elses_comment(self, unit_env):
        """Owning the post gives no rights over its comments."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)
        comment = await comment_repo.save(make_comment(post.id, UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(post.creator_id, comment.id)

        assert await comment_repo.find_by_id(comment.id) is not None
