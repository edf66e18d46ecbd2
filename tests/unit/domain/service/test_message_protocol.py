"""Unit tests for the action message protocol."""

from uuid import uuid4

import pytest

from readproof.domain.error import ErrorCode, ReplayError
from readproof.domain.service import MessageProtocol
from readproof.domain.service.message_protocol import build_message
from readproof.domain.value import ActionType, VoteType

TIMESTAMP = 1_700_000_000_000


class TestBuildMessage:
    """Tests for rendering the text clients sign."""

    def test_top_level_comment_names_no_parent(self):
        message = build_message(
            ActionType.POST_COMMENT,
            TIMESTAMP,
            title="On Proofs",
            thread_id="blog-1",
            content="Nice",
        )

        assert message == (
            "I want to comment on: On Proofs\nBlog ID: blog-1\n"
            f"Parent Comment: none\nContent: Nice\nTimestamp: {TIMESTAMP}"
        )

    def test_vote_type_rendered_as_wire_value(self):
        comment_id = uuid4()

        message = build_message(
            ActionType.VOTE, TIMESTAMP, comment_id=comment_id, vote_type=VoteType.DOWN
        )

        assert message == (
            f"Vote on comment: {comment_id}\nVote type: downvote\nTimestamp: {TIMESTAMP}"
        )


class TestCheck:
    """Tests for cross-checking embedded fields against the request."""

    def test_matching_top_level_comment_passes(self):
        protocol = MessageProtocol()
        message = build_message(
            ActionType.POST_COMMENT, TIMESTAMP, thread_id="blog-1", content="Hi"
        )

        protocol.check(
            ActionType.POST_COMMENT,
            message,
            {"thread_id": "blog-1", "parent_id": None, "content": "Hi"},
        )

    def test_matching_reply_passes(self):
        protocol = MessageProtocol()
        parent_id = uuid4()
        message = build_message(
            ActionType.POST_COMMENT,
            TIMESTAMP,
            thread_id="blog-1",
            parent_id=parent_id,
            content="Hi",
        )

        protocol.check(
            ActionType.POST_COMMENT,
            message,
            {"thread_id": "blog-1", "parent_id": parent_id, "content": "Hi"},
        )

    def test_comment_id_compared_as_uuid(self):
        """Case differences in the embedded id don't matter."""
        protocol = MessageProtocol()
        comment_id = uuid4()
        message = f"Delete comment: {str(comment_id).upper()}\nTimestamp: {TIMESTAMP}"

        protocol.check(ActionType.DELETE_COMMENT, message, {"comment_id": comment_id})

    def test_signature_for_other_thread_rejected(self):
        """A message signed for one thread can't be replayed on another."""
        protocol = MessageProtocol()
        message = build_message(
            ActionType.SIGN_READ, TIMESTAMP, title="Post", thread_id="blog-1"
        )

        with pytest.raises(ReplayError) as exc_info:
            protocol.check(ActionType.SIGN_READ, message, {"thread_id": "blog-2"})

        assert exc_info.value.code is ErrorCode.PAYLOAD_MISMATCH
        assert "thread_id" in exc_info.value.message

    def test_signature_for_other_comment_rejected(self):
        protocol = MessageProtocol()
        message = build_message(ActionType.UNVOTE, TIMESTAMP, comment_id=uuid4())

        with pytest.raises(ReplayError):
            protocol.check(ActionType.UNVOTE, message, {"comment_id": uuid4()})

    def test_top_level_message_rejected_for_reply(self):
        """A top-level signature can't be used to post a reply."""
        protocol = MessageProtocol()
        message = build_message(
            ActionType.POST_COMMENT, TIMESTAMP, thread_id="blog-1", content="Hi"
        )

        with pytest.raises(ReplayError, match="parent_id"):
            protocol.check(
                ActionType.POST_COMMENT,
                message,
                {"thread_id": "blog-1", "parent_id": uuid4(), "content": "Hi"},
            )

    def test_missing_label_rejected(self):
        protocol = MessageProtocol()

        with pytest.raises(ReplayError):
            protocol.check(
                ActionType.DELETE_COMMENT,
                f"Timestamp: {TIMESTAMP}",
                {"comment_id": uuid4()},
            )

    def test_content_mismatch_rejected_when_strict(self):
        protocol = MessageProtocol(strict_payload=True)
        comment_id = uuid4()
        message = build_message(
            ActionType.EDIT_COMMENT, TIMESTAMP, comment_id=comment_id, content="old"
        )

        with pytest.raises(ReplayError, match="content"):
            protocol.check(
                ActionType.EDIT_COMMENT,
                message,
                {"comment_id": comment_id, "content": "new"},
            )

    def test_payload_fields_ignored_when_not_strict(self):
        """Lenient mode only binds target ids."""
        protocol = MessageProtocol(strict_payload=False)
        comment_id = uuid4()
        message = build_message(
            ActionType.VOTE, TIMESTAMP, comment_id=comment_id, vote_type=VoteType.UP
        )

        protocol.check(
            ActionType.VOTE,
            message,
            {"comment_id": comment_id, "vote_type": VoteType.DOWN},
        )

    def test_vote_type_mismatch_rejected_when_strict(self):
        protocol = MessageProtocol()
        comment_id = uuid4()
        message = build_message(
            ActionType.VOTE, TIMESTAMP, comment_id=comment_id, vote_type=VoteType.UP
        )

        with pytest.raises(ReplayError, match="vote_type"):
            protocol.check(
                ActionType.VOTE,
                message,
                {"comment_id": comment_id, "vote_type": VoteType.DOWN},
            )

    def test_title_never_checked(self):
        protocol = MessageProtocol()
        message = build_message(
            ActionType.SIGN_READ, TIMESTAMP, title="Anything", thread_id="blog-1"
        )

        protocol.check(
            ActionType.SIGN_READ, message, {"thread_id": "blog-1", "title": "Other"}
        )


class TestExtractFields:
    def test_multiline_content_extracted_up_to_timestamp(self):
        protocol = MessageProtocol()
        message = build_message(
            ActionType.POST_COMMENT,
            TIMESTAMP,
            thread_id="blog-1",
            content="first line\nsecond line",
        )

        fields = protocol.extract_fields(ActionType.POST_COMMENT, message)

        assert fields["content"] == "first line\nsecond line"
        assert fields["thread_id"] == "blog-1"
        assert fields["parent_id"] == "none"
