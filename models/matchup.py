"""Matchup data model.

A matchup is one game at a fixed place in the bracket. It points forward to
the matchup its winner feeds into (`next_matchup_id`); nothing points back.
The parity of `position` decides which slot of the next matchup the winner
takes: even -> team_a, odd -> team_b.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from models.errors import InvalidInput
from models.team import Team


@dataclass(frozen=True)
class Matchup:
    id: int
    region: str
    round: int
    matchup_index: int
    position: int
    team_a: Team | None = None
    team_b: Team | None = None
    winner: Team | None = None
    next_matchup_id: int | None = None

    @property
    def feeds_team_a(self) -> bool:
        """True if this matchup's winner lands in the next matchup's team_a slot."""
        return self.position % 2 == 0

    @property
    def is_decidable(self) -> bool:
        return self.team_a is not None and self.team_b is not None

    @property
    def is_incomplete(self) -> bool:
        """Both teams are known but no winner has been picked."""
        return self.is_decidable and self.winner is None

    def has_team(self, team: Team) -> bool:
        return team == self.team_a or team == self.team_b

    def loser(self) -> Team | None:
        """The team that did not advance, once a winner is set."""
        if self.winner is None or not self.is_decidable:
            return None
        return self.team_b if self.winner == self.team_a else self.team_a

    def with_slot(self, team: Team | None, team_a: bool) -> Matchup:
        """Copy with one slot replaced."""
        if team_a:
            return replace(self, team_a=team)
        return replace(self, team_b=team)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "region": self.region,
            "round": self.round,
            "matchupIndex": self.matchup_index,
            "teamA": self.team_a.to_dict() if self.team_a else None,
            "teamB": self.team_b.to_dict() if self.team_b else None,
            "winner": self.winner.to_dict() if self.winner else None,
            "nextMatchupId": self.next_matchup_id,
            "position": self.position,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Matchup:
        if not isinstance(data, dict):
            raise InvalidInput(f"Matchup data must be an object, got {type(data).__name__}")
        next_id = data.get("nextMatchupId")
        return cls(
            id=int(data["id"]),
            region=str(data["region"]),
            round=int(data["round"]),
            matchup_index=int(data["matchupIndex"]),
            position=int(data["position"]),
            team_a=Team.from_dict(data.get("teamA")),
            team_b=Team.from_dict(data.get("teamB")),
            winner=Team.from_dict(data.get("winner")),
            next_matchup_id=int(next_id) if next_id is not None else None,
        )

    def __str__(self):
        a = str(self.team_a) if self.team_a else "TBD"
        b = str(self.team_b) if self.team_b else "TBD"
        return f"#{self.id} {a} vs {b}"
