"""Picking winners and undoing the downstream effects of changed picks.

Choosing a winner writes the team into the next round's slot for that
matchup (team_a for even positions, team_b for odd). Changing a pick first
removes the previous winner from every later matchup it had reached, so a
bracket never holds a team past the game it was picked to lose.
"""

from __future__ import annotations

import logging
from dataclasses import replace

import config
from engine.queries import find_matchup
from models.bracket import BracketData
from models.errors import InvalidPick
from models.matchup import Matchup
from models.team import Team

logger = logging.getLogger(__name__)


def select_winner(bracket: BracketData, matchup_id: int, team: Team) -> BracketData:
    """Pick `team` to win a matchup and advance it one round.

    The next matchup only gets its slot filled; its winner is left alone.
    Reselecting the current winner returns an equal bracket.

    Raises:
        InvalidPick: the matchup does not exist or `team` is not playing in it.
            The input bracket is never modified.
    """
    found = find_matchup(bracket, matchup_id)
    if found is None:
        logger.warning("Rejected pick of %s: no matchup %s", team, matchup_id)
        raise InvalidPick(f"No matchup with id {matchup_id}", matchup_id=matchup_id, team=team)

    matchup, round_num = found
    if team is None or not matchup.has_team(team):
        logger.warning("Rejected pick of %s for matchup %d (%s)", team, matchup_id, matchup)
        raise InvalidPick(
            f"{team} is not playing in matchup {matchup_id}",
            matchup_id=matchup_id, team=team,
        )

    previous = matchup.winner
    if previous is not None and previous != team:
        # Must run before the new winner is written
        bracket = invalidate_downstream(bracket, previous, round_num, matchup_id)

    updated = [replace(matchup, winner=team)]
    if matchup.next_matchup_id is not None:
        next_matchup = bracket.get(matchup.next_matchup_id)
        if next_matchup is not None:
            updated.append(next_matchup.with_slot(team, team_a=matchup.feeds_team_a))

    logger.debug("Matchup %d winner: %s (was %s)", matchup_id, team, previous)
    return bracket.replace_matchups(updated)


def invalidate_downstream(bracket: BracketData, team: Team,
                          from_round: int, from_matchup_id: int) -> BracketData:
    """Remove `team` from the matchups it advanced into past `from_matchup_id`.

    Walks the next_matchup_id chain. At each step the team's slot is cleared;
    if it had also been picked to win there, the winner is cleared and the
    walk continues, otherwise it stops. A team that is not found (already
    removed, or never advanced) leaves the bracket unchanged.
    """
    if from_round > config.NUM_ROUNDS:
        return bracket

    cleared: dict[int, Matchup] = {}
    current = bracket.get(from_matchup_id)

    while current is not None and current.next_matchup_id is not None:
        target = bracket.get(current.next_matchup_id)
        if target is None:
            break

        if target.team_a == team:
            target = replace(target, team_a=None)
        elif target.team_b == team:
            target = replace(target, team_b=None)
        else:
            break

        if target.winner != team:
            cleared[target.id] = target
            break

        target = replace(target, winner=None)
        cleared[target.id] = target
        current = target

    if cleared:
        logger.debug("Cleared %s from matchups %s", team, sorted(cleared))
    return bracket.replace_matchups(cleared.values())


def clear_picks(bracket: BracketData) -> BracketData:
    """Reset every pick, keeping the round 1 field in place."""
    updated = []
    for m in bracket.matchups():
        if m.round == 1:
            if m.winner is not None:
                updated.append(replace(m, winner=None))
        elif m.team_a is not None or m.team_b is not None or m.winner is not None:
            updated.append(replace(m, team_a=None, team_b=None, winner=None))
    return bracket.replace_matchups(updated)
