"""
Tests for repeated race and fight trials.

Run with: python -m pytest tests/test_tournament.py -v
"""

import pytest

from spacegames.tournament import TournamentSummary, run_tournament


class TestRunTournament:
    """Tests for run_tournament."""

    def test_warship_mirror_match(self):
        """Test that deterministic ships draw every race and fight."""
        summary = run_tournament("war", "war", trials=20, seed=1)

        assert isinstance(summary, TournamentSummary)
        assert summary.trials == 20
        assert summary.race_wins == (0, 0, 20)
        assert summary.fight_wins == (0, 0, 20)
        assert summary.mean_race_distance == (500.0, 500.0)
        assert summary.std_race_distance == (0.0, 0.0)
        assert summary.mean_fight_rounds == pytest.approx(17.0)

    def test_pirate_vs_warship_counts(self):
        summary = run_tournament("pirate", "war", trials=200, seed=7)

        assert sum(summary.race_wins) == 200
        assert sum(summary.fight_wins) == 200
        assert summary.mean_race_distance[1] == 500.0
        assert summary.std_race_distance[1] == 0.0
        assert summary.std_race_distance[0] > 0.0
        assert 1.0 <= summary.mean_fight_rounds <= 7.0

    def test_warship_usually_wins_fight(self):
        """Test that the sturdier family wins most fights."""
        summary = run_tournament("pirate", "war", trials=300, seed=11)
        assert summary.fight_wins[1] > summary.fight_wins[0]

    def test_reproducible_with_seed(self):
        summary_a = run_tournament("pirate", "pirate", trials=50, seed=3)
        summary_b = run_tournament("pirate", "pirate", trials=50, seed=3)
        assert summary_a == summary_b

    def test_round_cap_passed_through(self):
        summary = run_tournament("war", "war", trials=3, seed=0, max_fight_rounds=5)

        assert summary.fight_wins == (0, 0, 3)
        assert summary.mean_fight_rounds == pytest.approx(5.0)

    def test_rejects_zero_trials(self):
        with pytest.raises(ValueError, match="trials"):
            run_tournament("pirate", "war", trials=0)

    def test_unknown_family(self):
        with pytest.raises(KeyError, match="not found"):
            run_tournament("pirate", "freighter", trials=1)


class TestFormatTable:
    """Tests for TournamentSummary.format_table."""

    def test_contains_counts(self):
        summary = run_tournament("war", "war", trials=4, seed=2)
        table = summary.format_table()

        assert "Tournament: war vs war (4 trials)" in table
        assert "Race wins" in table
        assert "Fight wins" in table
        assert "500.0" in table
        assert "17.0 rounds" in table
