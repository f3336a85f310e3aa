"""Tracking the real tournament.

Actual results are kept in a bracket of the same shape as a participant's
picks, so recording (or correcting) a result goes through the same winner
selection and cascade as a pick. Team status is derived from that bracket
rather than stored, which keeps it right after corrections.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

import config
from engine.picks import select_winner
from engine.seeding import build
from models.bracket import BracketData
from models.errors import InvalidInput, InvalidPick
from models.regions import Regions
from models.team import Team

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeamStatus:
    seed: int
    eliminated: bool = False
    elimination_round: int | None = None
    elimination_matchup_id: int | None = None

    def to_dict(self) -> dict:
        return {
            "seed": self.seed,
            "eliminated": self.eliminated,
            "eliminationRound": self.elimination_round,
            "eliminationMatchupId": self.elimination_matchup_id,
        }


@dataclass(frozen=True)
class TournamentResults:
    results: BracketData
    completed_rounds: tuple[int, ...] = ()

    def to_dict(self) -> dict:
        return {
            "results": self.results.to_dict(),
            "teams": {name: s.to_dict() for name, s in team_statuses(self).items()},
            "completedRounds": list(self.completed_rounds),
        }

    @classmethod
    def from_dict(cls, data: dict) -> TournamentResults:
        # "teams" is derived from the results, so it is not read back
        if not isinstance(data, dict) or "results" not in data:
            raise InvalidInput("Tournament data must be an object with a 'results' bracket")
        return cls(
            results=BracketData.from_dict(data["results"]),
            completed_rounds=tuple(sorted(int(r) for r in data.get("completedRounds", []))),
        )


def new_tournament(regions: Regions) -> TournamentResults:
    return TournamentResults(results=build(regions))


def record_result(tournament: TournamentResults, matchup_id: int, winner: Team) -> TournamentResults:
    """Record (or correct) the winner of a real game.

    Raises:
        InvalidPick: unknown matchup, team not in it, or the game belongs to a
            round that is already marked complete (or precedes one)
    """
    loc = tournament.results.locate(matchup_id)
    if loc is not None:
        round_num = loc[0]
        locked = [r for r in tournament.completed_rounds if r >= round_num]
        if locked:
            raise InvalidPick(
                f"Cannot change matchup {matchup_id}: round {min(locked)} is already complete",
                matchup_id=matchup_id, team=winner,
            )

    results = select_winner(tournament.results, matchup_id, winner)
    logger.info("Recorded result: matchup %d won by %s", matchup_id, winner)
    return replace(tournament, results=results)


def mark_round_complete(tournament: TournamentResults, round_num: int) -> TournamentResults:
    """Lock a round once every game in it has a winner.

    Raises:
        InvalidInput: unknown round, or a game in the round is undecided
    """
    if round_num not in config.GAMES_PER_ROUND:
        raise InvalidInput(f"No round {round_num}")
    if round_num in tournament.completed_rounds:
        return tournament

    undecided = [m.id for m in tournament.results.get_round(round_num) if m.winner is None]
    if undecided:
        raise InvalidInput(
            f"{config.ROUND_NAMES[round_num]} still has undecided matchups: {undecided}"
        )

    logger.info("Marked %s complete", config.ROUND_NAMES[round_num])
    completed = tuple(sorted(set(tournament.completed_rounds) | {round_num}))
    return replace(tournament, completed_rounds=completed)


def team_statuses(tournament: TournamentResults) -> dict[str, TeamStatus]:
    """Per team name: seed and, if knocked out, where."""
    statuses = {}
    for m in tournament.results.get_round(1):
        for team in (m.team_a, m.team_b):
            if team is not None:
                statuses[team.name] = TeamStatus(seed=team.seed)

    for m in tournament.results.matchups():
        loser = m.loser()
        if loser is not None:
            statuses[loser.name] = TeamStatus(
                seed=loser.seed,
                eliminated=True,
                elimination_round=m.round,
                elimination_matchup_id=m.id,
            )
    return statuses


def pick_outcomes(picks: BracketData, tournament: TournamentResults) -> dict[int, bool | None]:
    """Per matchup id: True if the pick matched the real winner, False if not,
    None while the game is undecided or nothing was picked."""
    outcomes = {}
    for actual in tournament.results.matchups():
        picked = picks.get(actual.id)
        if actual.winner is None or picked is None or picked.winner is None:
            outcomes[actual.id] = None
        else:
            outcomes[actual.id] = picked.winner == actual.winner
    return outcomes


def busted_picks(picks: BracketData, tournament: TournamentResults) -> list[int]:
    """Undecided games where the picked winner has already been knocked out."""
    statuses = team_statuses(tournament)
    busted = []
    for actual in tournament.results.matchups():
        picked = picks.get(actual.id)
        if actual.winner is not None or picked is None or picked.winner is None:
            continue
        status = statuses.get(picked.winner.name)
        if status is not None and status.eliminated:
            busted.append(actual.id)
    return busted
