"""Bracket data structure.

The bracket is a binary tree of 63 matchups stored round by round:
- Round 1: 32 matchups (ids 0-31), seeded from the four regions
- Round 2: 16 matchups (ids 32-47)
- Round 3: 8 matchups (ids 48-55)
- Round 4: 4 matchups (ids 56-59), the regional finals
- Round 5: 2 matchups (ids 60-61), the Final Four
- Round 6: 1 matchup (id 62), the championship

Each matchup stores the id of the matchup its winner advances to. Feeders of
a matchup are derived on demand, so the structure holds no back-pointers.

BracketData is a value. Matchups are frozen and `replace_matchups` returns a
new bracket that rebuilds only the rounds it touches; every other round tuple
is shared with the source bracket, which is never modified.
"""

from __future__ import annotations

from typing import Iterable, Iterator

import config
from models.errors import InvalidInput
from models.matchup import Matchup


class BracketData:
    """A 63-matchup tournament bracket."""

    def __init__(self, rounds: dict[int, Iterable[Matchup]],
                 _index: dict[int, tuple[int, int]] | None = None):
        self._rounds: dict[int, tuple[Matchup, ...]] = {
            r: tuple(ms) for r, ms in sorted(rounds.items())
        }
        if _index is None:
            _index = {}
            for round_num, matchups in self._rounds.items():
                for i, m in enumerate(matchups):
                    _index[m.id] = (round_num, i)
        # id -> (round, position in the round tuple)
        self._index = _index

    # --- Access ---

    @property
    def round_numbers(self) -> list[int]:
        return list(self._rounds)

    def __getitem__(self, round_num: int) -> tuple[Matchup, ...]:
        return self._rounds[round_num]

    def get_round(self, round_num: int) -> tuple[Matchup, ...]:
        """Matchups of a round in matchup_index order; empty for unknown rounds."""
        return self._rounds.get(round_num, ())

    def matchups(self) -> Iterator[Matchup]:
        """All matchups, round ascending."""
        for matchups in self._rounds.values():
            yield from matchups

    def __len__(self):
        return sum(len(ms) for ms in self._rounds.values())

    def locate(self, matchup_id: int) -> tuple[int, int] | None:
        """(round, index within round) for a matchup id, or None."""
        return self._index.get(matchup_id)

    def get(self, matchup_id: int) -> Matchup | None:
        loc = self._index.get(matchup_id)
        if loc is None:
            return None
        round_num, i = loc
        return self._rounds[round_num][i]

    @property
    def champion(self):
        final = self.get_round(config.NUM_ROUNDS)
        return final[0].winner if final else None

    # --- Updates ---

    def replace_matchups(self, updated: Iterable[Matchup]) -> BracketData:
        """Return a new bracket with the given matchups swapped in by id.

        Only the rounds containing an updated matchup are copied.
        """
        touched: dict[int, list[Matchup]] = {}
        for m in updated:
            loc = self._index.get(m.id)
            if loc is None:
                raise KeyError(f"Matchup {m.id} is not in this bracket")
            round_num, i = loc
            if round_num not in touched:
                touched[round_num] = list(self._rounds[round_num])
            touched[round_num][i] = m

        if not touched:
            return self
        rounds = dict(self._rounds)
        for round_num, matchups in touched.items():
            rounds[round_num] = tuple(matchups)
        return BracketData(rounds, _index=self._index)

    # --- Comparison / serialization ---

    def __eq__(self, other):
        if not isinstance(other, BracketData):
            return NotImplemented
        return self._rounds == other._rounds

    def __repr__(self):
        sizes = {r: len(ms) for r, ms in self._rounds.items()}
        return f"BracketData(rounds={sizes})"

    def to_dict(self) -> dict[str, list[dict]]:
        """Persisted shape: {"1": [matchup, ...], ..., "6": [...]}."""
        return {str(r): [m.to_dict() for m in ms] for r, ms in self._rounds.items()}

    @classmethod
    def from_dict(cls, data: dict) -> BracketData:
        """Inverse of to_dict. Keys that are not round numbers are ignored."""
        if not isinstance(data, dict):
            raise InvalidInput(f"Bracket data must be an object, got {type(data).__name__}")
        rounds = {}
        for key, matchups in data.items():
            try:
                round_num = int(key)
            except (TypeError, ValueError):
                continue
            parsed = [Matchup.from_dict(m) for m in matchups]
            rounds[round_num] = sorted(parsed, key=lambda m: m.matchup_index)
        return cls(rounds)
