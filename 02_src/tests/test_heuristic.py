"""Tests for detect_heuristic_reply()."""

import pytest

from bridge.resolution import detect_heuristic_reply


@pytest.fixture
def alice(make_message):
    return make_message(id="3", user_id="u1", name="Alice B", text="hi")


class TestMentionPattern:
    """Tests for @mention detection."""

    def test_mention_matches_display_name(self, make_message, alice):
        """Test that a mention finds the author whose name contains it."""
        msg = make_message(id="5", user_id="u2", text="@Alice lol")

        assert detect_heuristic_reply(msg, [alice]) is alice

    def test_mention_is_case_insensitive(self, make_message, alice):
        msg = make_message(id="5", user_id="u2", text="@aLiCe thanks")

        assert detect_heuristic_reply(msg, [alice]) is alice

    def test_mention_substring_of_name(self, make_message):
        """Test that a partial name mention matches."""
        target = make_message(id="3", user_id="u1", name="Jonathan", text="x")
        msg = make_message(id="5", user_id="u2", text="@jon agreed")

        assert detect_heuristic_reply(msg, [target]) is target

    def test_first_mention_only(self, make_message, alice):
        """Test that only the first mention token is used."""
        carol = make_message(id="4", user_id="u3", name="Carol", text="yo")
        msg = make_message(id="5", user_id="u2", text="@Carol and @Alice")

        assert detect_heuristic_reply(msg, [alice, carol]) is carol

    def test_first_candidate_in_window_order(self, make_message):
        """Test that the window order breaks ties."""
        newer = make_message(id="4", user_id="u1", name="Alice", text="newer")
        older = make_message(id="2", user_id="u1", name="Alice", text="older")
        msg = make_message(id="5", user_id="u2", text="@alice")

        assert detect_heuristic_reply(msg, [newer, older]) is newer

    def test_mention_excludes_same_author(self, make_message):
        """Test that the sender's own messages are never matched."""
        own = make_message(id="3", user_id="u2", name="Alice", text="mine")
        msg = make_message(id="5", user_id="u2", name="Alice", text="@alice")

        assert detect_heuristic_reply(msg, [own]) is None

    def test_mention_excludes_same_id(self, make_message):
        same = make_message(id="5", user_id="u9", name="Alice", text="dup")
        msg = make_message(id="5", user_id="u2", text="@alice")

        assert detect_heuristic_reply(msg, [same]) is None

    def test_unmatched_mention_falls_through(self, make_message):
        """Test that an unmatched mention still lets quote detection run."""
        target = make_message(id="3", user_id="u1", name="Dan", text="Pizza tonight?")
        msg = make_message(id="5", user_id="u2", text="@nobody\n> pizza tonight")

        assert detect_heuristic_reply(msg, [target]) is target

    def test_mention_of_non_ascii_name(self, make_message):
        """Test that a mention may start with a non-ASCII letter."""
        target = make_message(id="3", user_id="u1", name="Élodie Martin", text="x")
        msg = make_message(id="5", user_id="u2", text="@Élodie merci")

        assert detect_heuristic_reply(msg, [target]) is target

    def test_mention_keeps_accented_letters(self, make_message):
        """Test that the whole accented token is matched, not its ASCII prefix."""
        zoey = make_message(id="4", user_id="u3", name="Zoey", text="a")
        zoe = make_message(id="3", user_id="u1", name="Zoë", text="b")
        msg = make_message(id="5", user_id="u2", text="@zoë yes")

        assert detect_heuristic_reply(msg, [zoey, zoe]) is zoe


class TestQuotePattern:
    """Tests for "> quoted" line detection."""

    def test_quote_line(self, make_message):
        target = make_message(id="3", user_id="u1", text="The meeting is at Noon")
        msg = make_message(id="5", user_id="u2", text="> meeting is at noon\nok!")

        assert detect_heuristic_reply(msg, [target]) is target

    def test_quote_not_on_first_line(self, make_message):
        target = make_message(id="3", user_id="u1", text="see you there")
        msg = make_message(id="5", user_id="u2", text="sure\n>see you there")

        assert detect_heuristic_reply(msg, [target]) is target

    def test_quote_skips_messages_without_text(self, make_message):
        image_only = make_message(id="4", user_id="u3", text=None)
        target = make_message(id="3", user_id="u1", text="quoted words")
        msg = make_message(id="5", user_id="u2", text="> quoted words")

        assert detect_heuristic_reply(msg, [image_only, target]) is target

    def test_quote_excludes_self(self, make_message):
        own = make_message(id="3", user_id="u2", text="quoted words")
        msg = make_message(id="5", user_id="u2", text="> quoted words")

        assert detect_heuristic_reply(msg, [own]) is None

    def test_quote_line_with_crlf(self, make_message):
        """Test that a CRLF line ending is not part of the quoted text."""
        target = make_message(id="3", user_id="u1", text="hi there")
        msg = make_message(id="5", user_id="u2", text="> hi there\r\nok")

        assert detect_heuristic_reply(msg, [target]) is target


class TestNameColonPattern:
    """Tests for "text:" line detection."""

    def test_trailing_colon(self, make_message):
        target = make_message(id="3", user_id="u1", text="who wants lunch")
        msg = make_message(id="5", user_id="u2", text="who wants lunch:\nme")

        assert detect_heuristic_reply(msg, [target]) is target

    def test_quote_tried_before_colon(self, make_message):
        """Test that the quote pattern has precedence over the colon pattern."""
        quoted = make_message(id="3", user_id="u1", text="first thing")
        coloned = make_message(id="4", user_id="u3", text="second thing")
        msg = make_message(id="5", user_id="u2", text="second thing:\n> first thing")

        assert detect_heuristic_reply(msg, [coloned, quoted]) is quoted

    def test_colon_used_when_quote_misses(self, make_message):
        target = make_message(id="4", user_id="u3", text="second thing")
        msg = make_message(id="5", user_id="u2", text="second thing:\n> unknown")

        assert detect_heuristic_reply(msg, [target]) is target

    def test_trailing_colon_with_crlf(self, make_message):
        target = make_message(id="3", user_id="u1", text="who wants lunch")
        msg = make_message(id="5", user_id="u2", text="who wants lunch:\r\nme")

        assert detect_heuristic_reply(msg, [target]) is target


class TestNoMatch:
    """Tests for cases without a reply."""

    def test_no_text(self, make_message, alice):
        msg = make_message(id="5", user_id="u2", text=None)

        assert detect_heuristic_reply(msg, [alice]) is None

    def test_plain_text(self, make_message, alice):
        msg = make_message(id="5", user_id="u2", text="just chatting")

        assert detect_heuristic_reply(msg, [alice]) is None

    def test_empty_window(self, make_message):
        msg = make_message(id="5", user_id="u2", text="@alice > hi")

        assert detect_heuristic_reply(msg, []) is None


class TestDeterminism:
    """Tests for stable results."""

    def test_same_input_same_result(self, make_message, alice):
        """Test that repeated detection over a frozen window agrees."""
        window = [
            make_message(id="4", user_id="u3", name="Carol", text="hello there"),
            alice,
        ]
        msg = make_message(id="5", user_id="u2", text="@alice\n> hello there")

        results = {detect_heuristic_reply(msg, window) for _ in range(5)}
        assert results == {alice}

    def test_never_returns_own_id_or_author(self, make_message):
        """Test self-exclusion over a window full of self-matches."""
        msg = make_message(id="5", user_id="u2", name="Bob", text="@bob\n> bob\nbob:")
        window = [
            make_message(id="5", user_id="u7", name="Bob", text="bob"),
            make_message(id="4", user_id="u2", name="Bob", text="bob"),
        ]

        assert detect_heuristic_reply(msg, window) is None
