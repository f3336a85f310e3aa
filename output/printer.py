"""Pretty-print bracket output."""

from tabulate import tabulate

import config
from engine.results import TournamentResults, busted_picks, pick_outcomes, team_statuses
from engine.validation import find_incomplete_matchups, validate
from models.bracket import BracketData
from models.matchup import Matchup


def _team(team) -> str:
    return str(team) if team else "TBD"


def _matchup_row(m: Matchup) -> list:
    winner = _team(m.winner) if m.winner else ("pick needed" if m.is_incomplete else "")
    return [m.id, m.region, _team(m.team_a), _team(m.team_b), winner, m.next_matchup_id]


def print_bracket(bracket: BracketData, round_num: int | None = None):
    """Print the bracket round by round.

    Args:
        bracket: Any bracket, partially picked or not
        round_num: Only print this round
    """
    rounds = [round_num] if round_num else bracket.round_numbers

    for r in rounds:
        name = config.ROUND_NAMES.get(r, f"Round {r}")
        print(f"\n--- {name.upper()} ---")
        rows = [_matchup_row(m) for m in bracket.get_round(r)]
        print(tabulate(rows, headers=["ID", "Region", "Team A", "Team B", "Winner", "Next"],
                       tablefmt="simple"))

    champion = bracket.champion
    if champion and round_num is None:
        print(f"\n  CHAMPION: {champion}")


def print_validation(bracket: BracketData):
    """Print which rounds still need picks."""
    missing_rounds = validate(bracket)
    if not missing_rounds:
        print("Bracket is complete and ready to submit.")
        return

    incomplete = find_incomplete_matchups(bracket)
    print(f"Bracket is not complete: {len(incomplete)} matchup(s) need a pick.")
    for name in missing_rounds:
        print(f"  - {name}")
    print(f"  Matchup ids: {', '.join(str(i) for i in incomplete)}")


def print_team_status(tournament: TournamentResults):
    """Print every team that is still alive, then the eliminated ones."""
    statuses = team_statuses(tournament)
    rows = []
    for name, status in sorted(statuses.items(), key=lambda x: (x[1].eliminated, x[1].seed, x[0])):
        eliminated_in = (config.ROUND_NAMES.get(status.elimination_round, "")
                         if status.eliminated else "")
        rows.append([name, status.seed, "out" if status.eliminated else "alive", eliminated_in,
                     status.elimination_matchup_id if status.eliminated else ""])

    completed = ", ".join(config.ROUND_NAMES[r] for r in tournament.completed_rounds) or "none"
    print(f"\nCompleted rounds: {completed}\n")
    print(tabulate(rows, headers=["Team", "Seed", "Status", "Eliminated in", "Matchup"],
                   tablefmt="simple"))


def print_pick_summary(picks: BracketData, tournament: TournamentResults):
    """Print how a participant's picks are holding up, by round."""
    outcomes = pick_outcomes(picks, tournament)
    busted = set(busted_picks(picks, tournament))

    rows = []
    for r in picks.round_numbers:
        ids = [m.id for m in picks.get_round(r)]
        correct = sum(1 for i in ids if outcomes.get(i) is True)
        wrong = sum(1 for i in ids if outcomes.get(i) is False)
        dead = sum(1 for i in ids if i in busted)
        pending = len(ids) - correct - wrong
        rows.append([config.ROUND_NAMES.get(r, f"Round {r}"), correct, wrong, pending, dead])

    print(tabulate(rows, headers=["Round", "Correct", "Wrong", "Pending", "Busted"],
                   tablefmt="simple"))
