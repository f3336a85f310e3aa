"""Read-only lookups over a bracket."""

from __future__ import annotations

from models.bracket import BracketData
from models.matchup import Matchup


def find_matchup(bracket: BracketData, matchup_id: int | None) -> tuple[Matchup, int] | None:
    """Return (matchup, round) for an id, or None if no such matchup exists."""
    if matchup_id is None:
        return None
    loc = bracket.locate(matchup_id)
    if loc is None:
        return None
    round_num, _ = loc
    return bracket.get(matchup_id), round_num


def find_feeders(bracket: BracketData, matchup_id: int) -> tuple[Matchup, ...]:
    """The previous-round matchups whose winners play in this matchup.

    Ordered by position, so the first feeder fills team_a. Empty for round 1
    and for unknown ids.
    """
    found = find_matchup(bracket, matchup_id)
    if found is None:
        return ()
    _, round_num = found
    feeders = [m for m in bracket.get_round(round_num - 1) if m.next_matchup_id == matchup_id]
    return tuple(sorted(feeders, key=lambda m: m.position))

