"""Unit tests for CommentService."""

from datetime import date

import pytest

from midweek.domain.error import ValidationError
from midweek.domain.service import CommentService
from midweek.domain.value import UserName
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddComment:
    """Tests for add_comment method."""

    @pytest.mark.asyncio
    async def test_text_is_stored_trimmed(self, unit_env, wednesday):
        comment_service = await unit_env.get(CommentService)

        comment = await comment_service.add_comment(
            UserName("Alice"), wednesday, "  bringing a ball  "
        )

        assert comment.text == "bringing a ball"
        assert comment.vote_date == wednesday
        assert comment.created_at.utcoffset() is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_blank_text_is_rejected(self, unit_env, wednesday, text):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError, match="Comment cannot be empty"):
            await comment_service.add_comment(UserName("Alice"), wednesday, text)

        assert await comment_service.get_comments_for_date(wednesday) == []

    @pytest.mark.asyncio
    async def test_overlong_text_is_rejected(self, unit_env, wednesday):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError, match="at most 2000"):
            await comment_service.add_comment(UserName("Alice"), wednesday, "x" * 2001)

    @pytest.mark.asyncio
    async def test_non_wednesday_is_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError, match="not a Wednesday"):
            await comment_service.add_comment(
                UserName("Alice"), date(2026, 10, 20), "hello"
            )


class TestGetComments:
    """Tests for get_comments_for_date method."""

    @pytest.mark.asyncio
    async def test_comments_come_back_in_creation_order(self, unit_env, wednesday):
        comment_service = await unit_env.get(CommentService)
        await comment_service.add_comment(UserName("Alice"), wednesday, "first")
        await comment_service.add_comment(UserName("Bob"), wednesday, "second")
        await comment_service.add_comment(
            UserName("Carol"), date(2026, 10, 28), "other week"
        )

        comments = await comment_service.get_comments_for_date(wednesday)

        assert [c.text for c in comments] == ["first", "second"]
        assert [c.user_name.root for c in comments] == ["Alice", "Bob"]
