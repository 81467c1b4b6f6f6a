"""
Basic test fixtures for the streakduel test suite.

Provides fresh engines, configs, event managers and combatants so each test
starts from an isolated fight.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from streakduel.core.config import CombatConfig
from streakduel.core.events import EventManager
from streakduel.game.combat import CombatEngine
from streakduel.game.entities import Combatant, Stats


@pytest.fixture
def config():
    """Create a default balance configuration."""
    return CombatConfig()


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def engine(config):
    """Create a seeded engine without an event bus."""
    return CombatEngine(config=config, seed=42)


@pytest.fixture
def hero():
    """Create a default combatant."""
    return Combatant("Hero", combatant_id="hero")


@pytest.fixture
def villain():
    """Create a second default combatant."""
    return Combatant("Villain", combatant_id="villain")


@pytest.fixture
def weak_stats():
    """Stats giving ATK 4, DEF 2, MOV 3."""
    return Stats(strength=1, endurance=0, charisma=0, intelligence=0, agility=1, wisdom=0)
