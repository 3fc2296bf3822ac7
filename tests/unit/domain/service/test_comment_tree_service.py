"""Unit tests for CommentTreeService."""

from datetime import datetime, timedelta

import pytest

from toolhub.application.usecase.common import CommentItem
from toolhub.config import CommunitySettings
from toolhub.domain.repository import (
    CommentRepository,
    ThreadRepository,
    UserRepository,
)
from toolhub.domain.service import (
    CommentService,
    CommentTreeService,
    ModerationService,
    UserService,
    VoteService,
)
from toolhub.domain.value import ANONYMOUS, VotableType, VoteType
from tests.conftest import make_comment, make_thread, make_user, viewer_for
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def _at(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


async def _setup(unit_env):
    user_repo = await unit_env.get(UserRepository)
    thread_repo = await unit_env.get(ThreadRepository)
    author = await user_repo.save(make_user("Grace"))
    thread = await thread_repo.save(make_thread(author.id))
    return author, thread


async def _lifting_tree_service(unit_env) -> CommentTreeService:
    return CommentTreeService(
        comment_repository=await unit_env.get(CommentRepository),
        vote_service=await unit_env.get(VoteService),
        user_service=await unit_env.get(UserService),
        settings=CommunitySettings(show_orphaned_replies=True),
    )


class TestTreeShape:
    """Tests for nesting and sibling ordering."""

    @pytest.mark.asyncio
    async def test_empty_thread_has_empty_tree(self, unit_env):
        tree_service = await unit_env.get(CommentTreeService)
        _, thread = await _setup(unit_env)

        assert await tree_service.load_thread_comments(thread.id, ANONYMOUS) == []

    @pytest.mark.asyncio
    async def test_replies_nest_under_parents(self, unit_env):
        """Every reply appears under its parent with increasing depth."""
        tree_service = await unit_env.get(CommentTreeService)
        comment_repo = await unit_env.get(CommentRepository)
        author, thread = await _setup(unit_env)

        root = await comment_repo.save(
            make_comment(thread.id, author.id, created_at=_at(0))
        )
        child = await comment_repo.save(
            make_comment(thread.id, author.id, root.id, created_at=_at(1))
        )
        grandchild = await comment_repo.save(
            make_comment(thread.id, author.id, child.id, created_at=_at(2))
        )

        tree = await tree_service.load_thread_comments(thread.id, ANONYMOUS)

        assert [node.comment.id for node in tree] == [root.id]
        assert tree[0].depth == 0
        assert [node.comment.id for node in tree[0].replies] == [child.id]
        assert tree[0].replies[0].depth == 1
        deepest = tree[0].replies[0].replies[0]
        assert deepest.comment.id == grandchild.id
        assert deepest.depth == 2
        assert deepest.replies == []

    @pytest.mark.asyncio
    async def test_siblings_ordered_by_upvotes_then_age(self, unit_env):
        """Most upvoted first; ties go to the older comment."""
        tree_service = await unit_env.get(CommentTreeService)
        comment_repo = await unit_env.get(CommentRepository)
        author, thread = await _setup(unit_env)

        older_tied = await comment_repo.save(
            make_comment(thread.id, author.id, upvotes=2, created_at=_at(0))
        )
        popular = await comment_repo.save(
            make_comment(thread.id, author.id, upvotes=9, created_at=_at(5))
        )
        newer_tied = await comment_repo.save(
            make_comment(thread.id, author.id, upvotes=2, created_at=_at(3))
        )

        tree = await tree_service.load_thread_comments(thread.id, ANONYMOUS)

        assert [node.comment.id for node in tree] == [
            popular.id,
            older_tied.id,
            newer_tied.id,
        ]

    @pytest.mark.asyncio
    async def test_other_threads_not_included(self, unit_env):
        tree_service = await unit_env.get(CommentTreeService)
        comment_repo = await unit_env.get(CommentRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        author, thread = await _setup(unit_env)
        other = await thread_repo.save(make_thread(author.id, title="Other"))
        await comment_repo.save(make_comment(other.id, author.id))

        assert await tree_service.load_thread_comments(thread.id, ANONYMOUS) == []

    @pytest.mark.asyncio
    async def test_can_reply_stops_at_max_depth(self, unit_env):
        """Nodes at the configured depth cap lose the reply affordance."""
        tree_service = await unit_env.get(CommentTreeService)
        comment_repo = await unit_env.get(CommentRepository)
        author, thread = await _setup(unit_env)
        settings = await unit_env.get(CommunitySettings)

        parent_id = None
        for i in range(settings.max_reply_depth + 2):
            comment = await comment_repo.save(
                make_comment(thread.id, author.id, parent_id, created_at=_at(i))
            )
            parent_id = comment.id

        tree = await tree_service.load_thread_comments(thread.id, ANONYMOUS)

        node = tree[0]
        depths = []
        while True:
            depths.append((node.depth, node.can_reply))
            if not node.replies:
                break
            node = node.replies[0]
        # Loading continues past the reply affordance cap
        assert len(depths) == settings.max_reply_depth + 2
        for depth, can_reply in depths:
            assert can_reply == (depth < settings.max_reply_depth)

    @pytest.mark.asyncio
    async def test_deep_reply_chain_builds_without_recursion(self, unit_env):
        """A chain far deeper than the interpreter's recursion limit loads."""
        tree_service = await unit_env.get(CommentTreeService)
        comment_repo = await unit_env.get(CommentRepository)
        author, thread = await _setup(unit_env)

        chain_length = 1200
        parent_id = None
        for i in range(chain_length):
            comment = await comment_repo.save(
                make_comment(thread.id, author.id, parent_id, created_at=_at(i))
            )
            parent_id = comment.id

        tree = await tree_service.load_thread_comments(thread.id, ANONYMOUS)

        node = tree[0]
        while node.replies:
            node = node.replies[0]
        assert node.comment.id == parent_id
        assert node.depth == chain_length - 1

        items = CommentItem.from_tree(tree)
        item = items[0]
        while item.replies:
            item = item.replies[0]
        assert item.comment_id == str(parent_id)
        assert item.depth == chain_length - 1
        assert item.can_reply is False


class TestDeletedComments:
    """Tests for soft-deleted comments in the tree."""

    @pytest.mark.asyncio
    async def test_deleted_comment_not_shown(self, unit_env):
        tree_service = await unit_env.get(CommentTreeService)
        moderation_service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        author, thread = await _setup(unit_env)

        kept = await comment_repo.save(
            make_comment(thread.id, author.id, created_at=_at(0))
        )
        removed = await comment_repo.save(
            make_comment(thread.id, author.id, created_at=_at(1))
        )
        await moderation_service.delete_comment(removed.id, viewer_for(author))

        tree = await tree_service.load_thread_comments(thread.id, ANONYMOUS)

        assert [node.comment.id for node in tree] == [kept.id]

    @pytest.mark.asyncio
    async def test_replies_of_deleted_comment_hidden_by_default(self, unit_env):
        """Deleting a comment hides its whole subtree."""
        tree_service = await unit_env.get(CommentTreeService)
        comment_repo = await unit_env.get(CommentRepository)
        moderation_service = await unit_env.get(ModerationService)
        author, thread = await _setup(unit_env)

        root = await comment_repo.save(
            make_comment(thread.id, author.id, created_at=_at(0))
        )
        middle = await comment_repo.save(
            make_comment(thread.id, author.id, root.id, created_at=_at(1))
        )
        await comment_repo.save(
            make_comment(thread.id, author.id, middle.id, created_at=_at(2))
        )
        await moderation_service.delete_comment(middle.id, viewer_for(author))

        tree = await tree_service.load_thread_comments(thread.id, ANONYMOUS)

        assert [node.comment.id for node in tree] == [root.id]
        assert tree[0].replies == []

    @pytest.mark.asyncio
    async def test_deleted_root_leaves_empty_tree_matching_comment_count(
        self, unit_env
    ):
        """The tree agrees with comment_count once the only root is deleted."""
        tree_service = await unit_env.get(CommentTreeService)
        comment_service = await unit_env.get(CommentService)
        moderation_service = await unit_env.get(ModerationService)
        thread_repo = await unit_env.get(ThreadRepository)
        author, thread = await _setup(unit_env)
        viewer = viewer_for(author)

        root = await comment_service.create_comment(thread.id, viewer, "Top level")
        await comment_service.create_reply(root.id, viewer, "Reply")
        await moderation_service.delete_comment(root.id, viewer)

        tree = await tree_service.load_thread_comments(thread.id, ANONYMOUS)
        stored = await thread_repo.find_by_id(thread.id)

        assert tree == []
        assert stored.comment_count == 0

    @pytest.mark.asyncio
    async def test_orphaned_reply_lifted_to_nearest_active_ancestor(self, unit_env):
        """With orphan display on, a reply under a deleted parent hangs
        under the grandparent."""
        comment_repo = await unit_env.get(CommentRepository)
        moderation_service = await unit_env.get(ModerationService)
        tree_service = await _lifting_tree_service(unit_env)
        author, thread = await _setup(unit_env)

        root = await comment_repo.save(
            make_comment(thread.id, author.id, created_at=_at(0))
        )
        middle = await comment_repo.save(
            make_comment(thread.id, author.id, root.id, created_at=_at(1))
        )
        leaf = await comment_repo.save(
            make_comment(thread.id, author.id, middle.id, created_at=_at(2))
        )
        await moderation_service.delete_comment(middle.id, viewer_for(author))

        tree = await tree_service.load_thread_comments(thread.id, ANONYMOUS)

        assert [node.comment.id for node in tree] == [root.id]
        lifted = tree[0].replies
        assert [node.comment.id for node in lifted] == [leaf.id]
        assert lifted[0].depth == 1
        # The stored parent is untouched
        assert lifted[0].comment.parent_comment_id == middle.id

    @pytest.mark.asyncio
    async def test_orphaned_reply_of_deleted_root_becomes_top_level(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)
        moderation_service = await unit_env.get(ModerationService)
        tree_service = await _lifting_tree_service(unit_env)
        author, thread = await _setup(unit_env)

        root = await comment_repo.save(
            make_comment(thread.id, author.id, created_at=_at(0))
        )
        reply = await comment_repo.save(
            make_comment(thread.id, author.id, root.id, created_at=_at(1))
        )
        await moderation_service.delete_comment(root.id, viewer_for(author))

        tree = await tree_service.load_thread_comments(thread.id, ANONYMOUS)

        assert [node.comment.id for node in tree] == [reply.id]
        assert tree[0].depth == 0


class TestViewerContext:
    """Tests for authors and the viewer's votes on nodes."""

    @pytest.mark.asyncio
    async def test_nodes_carry_viewer_votes(self, unit_env):
        tree_service = await unit_env.get(CommentTreeService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        author, thread = await _setup(unit_env)
        voter = viewer_for(await user_repo.save(make_user("Voter")))

        liked = await comment_repo.save(
            make_comment(thread.id, author.id, created_at=_at(0))
        )
        other = await comment_repo.save(
            make_comment(thread.id, author.id, created_at=_at(1))
        )
        await vote_service.cast_vote(
            VotableType.COMMENT, liked.id, voter, VoteType.UPVOTE
        )

        as_voter = await tree_service.load_thread_comments(thread.id, voter)
        as_anonymous = await tree_service.load_thread_comments(thread.id, ANONYMOUS)

        votes = {node.comment.id: node.user_vote for node in as_voter}
        assert votes == {liked.id: VoteType.UPVOTE, other.id: None}
        assert all(node.user_vote is None for node in as_anonymous)

    @pytest.mark.asyncio
    async def test_missing_author_shown_as_unknown(self, unit_env):
        """Comments by users that no longer exist get a placeholder author."""
        tree_service = await unit_env.get(CommentTreeService)
        comment_repo = await unit_env.get(CommentRepository)
        author, thread = await _setup(unit_env)
        ghost = make_user("Ghost")  # never saved

        await comment_repo.save(make_comment(thread.id, author.id, created_at=_at(0)))
        await comment_repo.save(make_comment(thread.id, ghost.id, created_at=_at(1)))

        tree = await tree_service.load_thread_comments(thread.id, ANONYMOUS)

        names = [node.author.name for node in tree]
        assert names == ["Grace", "Unknown"]

    @pytest.mark.asyncio
    async def test_author_without_name_shown_as_unknown(self, unit_env):
        tree_service = await unit_env.get(CommentTreeService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        _, thread = await _setup(unit_env)
        nameless = await user_repo.save(make_user(name=None))

        await comment_repo.save(make_comment(thread.id, nameless.id))

        tree = await tree_service.load_thread_comments(thread.id, ANONYMOUS)

        assert tree[0].author.name == "Unknown"
