"""Unit tests for comment id generation."""

import re

from threadtree.domain.value import new_comment_id


class TestNewCommentId:
    """Tests for new_comment_id."""

    def test_id_format(self):
        """Ids are a c_ prefix followed by lowercase base-36 characters."""
        comment_id = new_comment_id()

        assert re.fullmatch(r"c_[0-9a-z]{7,}", comment_id)

    def test_ids_generated_together_differ(self):
        """Ids minted in the same millisecond still differ."""
        generated = {new_comment_id() for _ in range(1000)}

        assert len(generated) == 1000
