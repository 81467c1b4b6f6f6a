"""
Unit tests for the BattleCalculator system.

Tests damage ranges, exact 2d6 probabilities and forecast generation.
"""

import pytest

from streakduel.game.combat import BattleCalculator, BattleForecast
from streakduel.game.combat.battle_calculator import TWO_D6_TOTALS
from tests.test_utils import CombatantTestBuilder


@pytest.fixture
def attacker():
    """ATK 4."""
    return CombatantTestBuilder("Attacker").with_stats(strength=1, agility=1).build()


@pytest.fixture
def defender():
    """DEF 2, MOV 3."""
    return CombatantTestBuilder("Defender").with_stats(strength=1, agility=1).build()


class TestTwoDiceTable:
    """Test the enumerated 2d6 outcomes."""

    def test_all_outcomes_present(self):
        assert TWO_D6_TOTALS.size == 36
        assert TWO_D6_TOTALS.min() == 2
        assert TWO_D6_TOTALS.max() == 12
        assert (TWO_D6_TOTALS == 7).sum() == 6


class TestDamageCalculation:
    """Test damage prediction methods."""

    def test_damage_range(self, attacker):
        assert BattleCalculator.damage_range(attacker) == (6, 16)

    def test_average_damage(self, attacker):
        assert BattleCalculator.average_damage(attacker) == pytest.approx(11.0)

    def test_negative_attack_points_clamped(self):
        feeble = CombatantTestBuilder("Feeble").with_stats(strength=-2).build()
        assert BattleCalculator.damage_range(feeble) == (0, 6)

    def test_forecast_does_not_touch_state(self, attacker, defender):
        """Forecasting mutates nobody."""
        BattleCalculator.calculate_forecast(attacker, defender)

        assert attacker.current_stamina == 20
        assert defender.current_health == 100


class TestDefenseChances:
    """Test exact defense probabilities."""

    def test_full_block_chance(self, defender):
        """DEF 2 blocks 11 when the roll is 9 or more: 10 of 36."""
        assert BattleCalculator.full_block_chance(defender, 11) == pytest.approx(10 / 36)

    def test_counter_gain_chance(self, defender):
        """Over-defense needs a roll of 10 or more: 6 of 36."""
        assert BattleCalculator.counter_gain_chance(defender, 11) == pytest.approx(6 / 36)

    def test_evasion_chance(self, defender):
        """MOV 3 evades 11 when the roll is 8 or more: 15 of 36."""
        assert BattleCalculator.evasion_chance(defender, 11) == pytest.approx(15 / 36)

    def test_certain_and_impossible(self, defender):
        assert BattleCalculator.full_block_chance(defender, 0) == 1.0
        assert BattleCalculator.full_block_chance(defender, 100) == 0.0


class TestForecast:
    """Test complete forecasts."""

    def test_calculate_forecast(self, attacker, defender):
        forecast = BattleCalculator.calculate_forecast(attacker, defender)

        assert isinstance(forecast, BattleForecast)
        assert forecast.attacker_name == "Attacker"
        assert forecast.defender_name == "Defender"
        assert (forecast.min_damage, forecast.max_damage) == (6, 16)
        assert forecast.average_damage == pytest.approx(11.0)
        assert forecast.full_block_chance == pytest.approx(10 / 36)
        assert forecast.counter_gain_chance == pytest.approx(6 / 36)
        assert forecast.evasion_chance == pytest.approx(15 / 36)
        assert not forecast.counter_ready

    def test_forecast_reports_ready_counter(self, attacker):
        ready = CombatantTestBuilder("Ready").with_counter(6).build()
        assert BattleCalculator.calculate_forecast(attacker, ready).counter_ready
