"""Seeding builder: lay out the 63-matchup tree from the seeded field.

Matchup ids and links follow a fixed scheme that outside consumers rely on:

    Round 1  region r, local i (0-7):  id = r*8 + i    next = i//2 + r*4 + 32
    Round 2  i (0-15):                 id = 32 + i     next = i//2 + 48
    Round 3  i (0-7):                  id = 48 + i     next = i//2 + 56
    Round 4  i (0-3):                  id = 56 + i     next = i//2 + 60
    Round 5  i (0-1):                  id = 60 + i     next = 62
    Round 6                            id = 62         next = None
"""

import logging
from typing import NamedTuple

import config
from models.bracket import BracketData
from models.matchup import Matchup
from models.regions import Regions

logger = logging.getLogger(__name__)

# Regional rounds: number of matchups each region contributes
_PER_REGION = {r: config.GAMES_PER_ROUND[r] // config.NUM_REGIONS for r in range(1, 5)}


class Slot(NamedTuple):
    """Where one matchup sits in the fixed layout."""
    id: int
    round: int
    matchup_index: int
    position: int
    next_matchup_id: int | None
    region_idx: int | None  # None for the Final Four and championship


def layout() -> dict[int, Slot]:
    """Every matchup id mapped to its round, position and successor."""
    slots = {}
    for region_idx in range(config.NUM_REGIONS):
        for i in range(_PER_REGION[1]):
            matchup_id = region_idx * _PER_REGION[1] + i
            slots[matchup_id] = Slot(
                matchup_id, 1, i, i,
                i // 2 + region_idx * _PER_REGION[2] + config.ROUND_ID_BASE[2],
                region_idx,
            )

    # Positions are global within the round from round 2 on
    for round_num in range(2, config.NUM_ROUNDS + 1):
        base = config.ROUND_ID_BASE[round_num]
        for i in range(config.GAMES_PER_ROUND[round_num]):
            if round_num < config.NUM_ROUNDS:
                next_id = i // 2 + config.ROUND_ID_BASE[round_num + 1]
            else:
                next_id = None
            region_idx = i // _PER_REGION[round_num] if round_num in _PER_REGION else None
            slots[base + i] = Slot(base + i, round_num, i, i, next_id, region_idx)
    return slots


def build(regions: Regions) -> BracketData:
    """Build a fresh bracket: round 1 seeded, later rounds empty.

    Raises:
        InvalidInput: unless `regions` holds exactly 4 regions of 16 teams
    """
    regions.check()

    pairings = [region.pairings() for region in regions]
    rounds: dict[int, list[Matchup]] = {r: [] for r in range(1, config.NUM_ROUNDS + 1)}

    for slot in layout().values():
        if slot.region_idx is not None:
            region = regions[slot.region_idx].name
        elif slot.round == config.NUM_ROUNDS:
            region = config.CHAMPIONSHIP_REGION
        else:
            region = config.FINAL_FOUR_REGION

        team_a = team_b = None
        if slot.round == 1:
            team_a, team_b = pairings[slot.region_idx][slot.matchup_index]

        rounds[slot.round].append(Matchup(
            id=slot.id,
            region=region,
            round=slot.round,
            matchup_index=slot.matchup_index,
            position=slot.position,
            team_a=team_a,
            team_b=team_b,
            next_matchup_id=slot.next_matchup_id,
        ))

    bracket = BracketData(rounds)
    logger.debug("Built bracket with %d matchups for regions %s", len(bracket), regions.names)
    return bracket
