"""Tests for fuzzy title matching."""

from mindmap.services.fuzzy_matcher import MatchTier, TitleMatch, match, score


class TestSubstring:
    def test_prefix_match(self):
        assert score("war", "Warehouse Plan") == 2000 - 0 - 11

    def test_case_and_whitespace_ignored(self):
        assert score("  WAR ", "warehouse plan  ") == score("war", "Warehouse Plan")

    def test_later_start_scores_lower(self):
        assert score("plan", "Warehouse Plan") == 2000 - 5 * 10 - 10
        assert score("plan", "Warehouse Plan") < score("ware", "Warehouse Plan")

    def test_exact_title(self):
        assert score("apple", "Apple") == 2000

    def test_tier(self):
        assert match("war", "Warehouse Plan").tier is MatchTier.SUBSTRING


class TestSubsequence:
    def test_spread_match(self):
        # 'w' at 0, 'p' at 10: span 11, penalty 9
        assert score("wp", "Warehouse Plan") == 1000 - 27 - 0
        assert match("wp", "Warehouse Plan").tier is MatchTier.SUBSEQUENCE

    def test_first_index_penalty(self):
        # 'a' at 1, 'e' at 3
        assert score("ae", "warehouse") == 1000 - 3 - 1

    def test_compact_beats_spread(self):
        assert score("wh", "warehouse") > score("wp", "warehouse plan")

    def test_ranks_below_substring(self):
        assert match("wp", "Warehouse Plan") < match("war", "Warehouse Plan")


class TestNoMatch:
    def test_missing_characters(self):
        assert score("xyz", "Warehouse Plan") is None

    def test_out_of_order(self):
        assert score("pw", "Warehouse Plan") is None

    def test_query_longer_than_title(self):
        assert score("applesauce", "apple") is None

    def test_empty_inputs(self):
        assert score("", "anything") is None
        assert score("   ", "anything") is None
        assert score("a", "") is None
        assert score(None, "a") is None
        assert score("a", None) is None


class TestTiers:
    def test_substring_outranks_subsequence_regardless_of_score(self):
        far_substring = match("abc", "x" * 300 + "abc")
        close_subsequence = match("abc", "axbxc")
        assert far_substring.score < close_subsequence.score
        assert far_substring > close_subsequence

    def test_same_tier_orders_by_score(self):
        assert TitleMatch(MatchTier.SUBSTRING, 10) < TitleMatch(MatchTier.SUBSTRING, 11)
