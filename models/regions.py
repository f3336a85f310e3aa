"""Region data: the four seeded quarter-brackets that make up the field."""

from __future__ import annotations

from dataclasses import dataclass

import config
from models.errors import InvalidInput
from models.team import Team


@dataclass(frozen=True)
class Region:
    name: str
    teams: tuple[Team, ...]  # bracket order: adjacent pairs play in round 1

    @classmethod
    def from_seed_map(cls, name: str, teams_by_seed: dict[int, str]) -> Region:
        """Build a region from {seed: team_name}, placing teams in SEED_ORDER."""
        missing = [s for s in config.SEED_ORDER if s not in teams_by_seed]
        if missing:
            raise InvalidInput(f"Region {name} is missing seeds {missing}")
        teams = tuple(Team(name=teams_by_seed[s], seed=s) for s in config.SEED_ORDER)
        return cls(name=name, teams=teams)

    def pairings(self) -> list[tuple[Team, Team]]:
        """Round 1 games in bracket order."""
        return [(self.teams[2 * i], self.teams[2 * i + 1]) for i in range(len(self.teams) // 2)]


@dataclass(frozen=True)
class Regions:
    """The tournament field, regions in declared bracket order.

    Region order matters: the first two regions meet in the first Final Four
    game, the last two in the second.
    """
    regions: tuple[Region, ...]

    def __iter__(self):
        return iter(self.regions)

    def __len__(self):
        return len(self.regions)

    def __getitem__(self, index: int) -> Region:
        return self.regions[index]

    @property
    def names(self) -> list[str]:
        return [r.name for r in self.regions]

    @property
    def teams(self) -> list[Team]:
        return [t for r in self.regions for t in r.teams]

    def check(self):
        """Raise InvalidInput unless this is a 4 x 16 field."""
        if len(self.regions) != config.NUM_REGIONS:
            raise InvalidInput(
                f"Expected {config.NUM_REGIONS} regions, got {len(self.regions)}"
            )
        for region in self.regions:
            if len(region.teams) != config.TEAMS_PER_REGION:
                raise InvalidInput(
                    f"Region {region.name} has {len(region.teams)} teams, "
                    f"expected {config.TEAMS_PER_REGION}"
                )
        seen = set()
        for team in self.teams:
            if team in seen:
                raise InvalidInput(f"Team {team} appears more than once")
            seen.add(team)

    def to_dict(self) -> dict:
        return {
            "regions": [
                {"name": r.name, "teams": [t.to_dict() for t in r.teams]}
                for r in self.regions
            ]
        }

    @classmethod
    def from_dict(cls, data: dict) -> Regions:
        """Parse {"regions": [{"name": ..., "teams": ...}, ...]}.

        `teams` is either a list of {"seed", "name"} in bracket order or a
        {"seed": "name"} map that is laid out using SEED_ORDER.
        """
        try:
            raw_regions = data["regions"]
        except (KeyError, TypeError) as exc:
            raise InvalidInput("Region data must have a 'regions' list") from exc

        regions = []
        for region_data in raw_regions:
            try:
                name = region_data["name"]
                teams = region_data["teams"]
                if isinstance(teams, dict):
                    region = Region.from_seed_map(name, {int(s): n for s, n in teams.items()})
                else:
                    region = Region(name=name, teams=tuple(Team.from_dict(t) for t in teams))
            except InvalidInput:
                raise
            except (KeyError, TypeError, ValueError) as exc:
                raise InvalidInput(f"Malformed region entry: {exc}") from exc
            regions.append(region)
        return cls(regions=tuple(regions))
