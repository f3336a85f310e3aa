"""Fill out a whole bracket in one pass.

Rounds are resolved in order. Round 1 games use the seeded field; every later
game takes its teams from the winners of its two feeders (lower position ->
team_a) and then picks a winner with the same rule.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import replace
from typing import Callable

import numpy as np

import config
from engine.queries import find_feeders
from models.bracket import BracketData
from models.team import Team

logger = logging.getLogger(__name__)


class AutoFillStrategy(str, enum.Enum):
    RANDOM = "random"
    FAVORITES = "favorites"


def pick_favorite(team_a: Team, team_b: Team) -> Team:
    """Lower seed number wins; equal seeds go to team_b."""
    return team_a if team_a.seed < team_b.seed else team_b


def _random_picker(rng: np.random.Generator) -> Callable[[Team, Team], Team]:
    def pick(team_a: Team, team_b: Team) -> Team:
        return team_a if rng.random() < 0.5 else team_b
    return pick


def auto_fill(bracket: BracketData, strategy: AutoFillStrategy | str,
              seed: int | None = None) -> BracketData:
    """Pick every game in the bracket.

    Args:
        bracket: A seeded bracket; existing picks are overwritten
        strategy: "random" (coin flip per game) or "favorites" (better seed)
        seed: Random seed for reproducible "random" fills

    Returns:
        A new bracket with every decidable matchup decided
    """
    strategy = AutoFillStrategy(strategy)
    if strategy is AutoFillStrategy.RANDOM:
        choose = _random_picker(np.random.default_rng(seed))
    else:
        choose = pick_favorite

    result = bracket
    for round_num in range(1, config.NUM_ROUNDS + 1):
        updated = []
        for matchup in result.get_round(round_num):
            team_a, team_b = matchup.team_a, matchup.team_b
            if round_num > 1:
                feeders = find_feeders(result, matchup.id)
                team_a = feeders[0].winner if len(feeders) > 0 else None
                team_b = feeders[1].winner if len(feeders) > 1 else None

            winner = choose(team_a, team_b) if team_a and team_b else None
            updated.append(replace(matchup, team_a=team_a, team_b=team_b, winner=winner))
        result = result.replace_matchups(updated)

    logger.debug("Auto-filled bracket (%s), champion %s", strategy.value, result.champion)
    return result
