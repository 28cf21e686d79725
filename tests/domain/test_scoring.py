"""Unit tests for merge-and-truncate ranking."""
from app.domain.score_entry import default_scores
from app.domain.scoring import RankingRules
from tests.conftest import make_entries


class TestRank:
    def test_insert_into_empty(self):
        top = RankingRules.rank([], {"player": "A", "score": 5})
        assert top == [{"player": "A", "score": 5}]

    def test_zeta_lands_second_and_master_drops(self):
        top = RankingRules.rank(default_scores(), {"player": "ZETA", "score": 9500})
        assert [e["player"] for e in top] == [
            "ACE", "ZETA", "HERO", "PILOT", "STAR",
            "FLYER", "SHOOTER", "WARRIOR", "CHAMPION", "LEGEND",
        ]
        assert len(top) == 10

    def test_lowest_score_on_full_board_is_excluded(self):
        seed = default_scores()
        top = RankingRules.rank(seed, {"player": "LOW", "score": 1})
        assert top == seed

    def test_length_grows_by_one_below_cap(self):
        entries = make_entries(("A", 300), ("B", 200), ("C", 100))
        top = RankingRules.rank(entries, {"player": "D", "score": 150})
        assert len(top) == 4
        assert [e["player"] for e in top] == ["A", "B", "D", "C"]

    def test_tie_keeps_existing_entry_first(self):
        entries = make_entries(("OLD", 500))
        top = RankingRules.rank(entries, {"player": "NEW", "score": 500})
        assert [e["player"] for e in top] == ["OLD", "NEW"]

    def test_duplicate_names_are_independent(self):
        entries = make_entries(("ACE", 500))
        top = RankingRules.rank(entries, {"player": "ACE", "score": 700})
        assert top == make_entries(("ACE", 700), ("ACE", 500))

    def test_input_list_not_mutated(self):
        entries = make_entries(("A", 1))
        RankingRules.rank(entries, {"player": "B", "score": 2})
        assert entries == make_entries(("A", 1))

    def test_unsorted_input_comes_out_ranked(self):
        entries = make_entries(("A", 1), ("B", 30), ("C", 20))
        top = RankingRules.rank(entries, {"player": "D", "score": 25})
        assert RankingRules.is_ranked(top)

    def test_custom_limit(self):
        top = RankingRules.rank(default_scores(), {"player": "X", "score": 1}, limit=3)
        assert len(top) == 3


class TestIsRanked:
    def test_seed_is_ranked(self):
        assert RankingRules.is_ranked(default_scores())

    def test_empty_is_ranked(self):
        assert RankingRules.is_ranked([])

    def test_ascending_is_not_ranked(self):
        assert not RankingRules.is_ranked(make_entries(("A", 1), ("B", 2)))

    def test_eleven_entries_is_not_ranked(self):
        entries = make_entries(*[(f"P{i}", 100 - i) for i in range(11)])
        assert not RankingRules.is_ranked(entries)
