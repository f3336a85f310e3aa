"""Bracket completeness and structural checks."""

import config
from engine.seeding import layout
from models.bracket import BracketData


def find_incomplete_matchups(bracket: BracketData) -> list[int]:
    """Ids of matchups with both teams set and no winner, in round order.

    Matchups still waiting on a feeder are not incomplete, just undecidable.
    """
    return [m.id for m in bracket.matchups() if m.is_incomplete]


def validate(bracket: BracketData) -> list[str]:
    """Names of the rounds that still have an incomplete matchup.

    An empty list means the bracket can be submitted.
    """
    incomplete_rounds = []
    for round_num in bracket.round_numbers:
        if any(m.is_incomplete for m in bracket[round_num]):
            incomplete_rounds.append(config.ROUND_NAMES.get(round_num, f"Round {round_num}"))
    return incomplete_rounds


def is_complete(bracket: BracketData) -> bool:
    """A champion is picked and no decidable matchup is left open."""
    return bracket.champion is not None and not validate(bracket)


def check_structure(bracket: BracketData) -> list[str]:
    """List every way the bracket breaks the fixed 63-matchup layout.

    Checks round sizes, id uniqueness and range, each matchup's round,
    position and successor against the seeding scheme, that every later
    matchup is fed by one even and one odd position, that the championship
    has no successor, and that winners come from their own matchup.
    """
    problems = []

    for round_num in range(1, config.NUM_ROUNDS + 1):
        expected = config.GAMES_PER_ROUND[round_num]
        actual = len(bracket.get_round(round_num))
        if actual != expected:
            problems.append(f"Round {round_num} has {actual} matchups, expected {expected}")
    extra = [r for r in bracket.round_numbers if r not in config.GAMES_PER_ROUND]
    if extra:
        problems.append(f"Unexpected rounds: {extra}")

    ids = [m.id for m in bracket.matchups()]
    if len(ids) != len(set(ids)):
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        problems.append(f"Duplicate matchup ids: {dupes}")
    out_of_range = sorted(i for i in ids if not 0 <= i < config.NUM_GAMES)
    if out_of_range:
        problems.append(f"Matchup ids out of range: {out_of_range}")

    slots = layout()
    feeders: dict[int, list[int]] = {}
    for m in bracket.matchups():
        if m.round != bracket.locate(m.id)[0]:
            problems.append(f"Matchup {m.id} says round {m.round} but is stored in round {bracket.locate(m.id)[0]}")
        if m.round == config.NUM_ROUNDS:
            if m.next_matchup_id is not None:
                problems.append(f"Championship matchup {m.id} links to {m.next_matchup_id}")
        else:
            loc = bracket.locate(m.next_matchup_id) if m.next_matchup_id is not None else None
            if loc is None:
                problems.append(f"Matchup {m.id} links to missing matchup {m.next_matchup_id}")
            elif loc[0] != m.round + 1:
                problems.append(
                    f"Matchup {m.id} in round {m.round} links to round {loc[0]}"
                )
            feeders.setdefault(m.next_matchup_id, []).append(m.position)

        slot = slots.get(m.id)
        if slot is not None:
            if m.round != slot.round:
                problems.append(f"Matchup {m.id} is in round {m.round}, expected round {slot.round}")
            if m.position != slot.position:
                problems.append(f"Matchup {m.id} has position {m.position}, expected {slot.position}")
            if m.next_matchup_id != slot.next_matchup_id:
                problems.append(
                    f"Matchup {m.id} links to {m.next_matchup_id}, expected {slot.next_matchup_id}"
                )

        if m.winner is not None and not m.has_team(m.winner):
            problems.append(f"Matchup {m.id} winner {m.winner} is not one of its teams")

    for round_num in range(2, config.NUM_ROUNDS + 1):
        for m in bracket.get_round(round_num):
            parities = sorted(p % 2 for p in feeders.get(m.id, []))
            if parities != [0, 1]:
                problems.append(
                    f"Matchup {m.id} is fed by positions {feeders.get(m.id, [])}, "
                    f"expected one even and one odd"
                )

    return problems
