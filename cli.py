"""Bracket pool - CLI entry point.

Usage:
    python cli.py init [--regions path.json|path.csv]
    python cli.py pick 0 "Auburn"
    python cli.py autofill --strategy favorites|random [--seed 42]
    python cli.py validate
    python cli.py show [--round 2]
    python cli.py clear
    python cli.py result 0 "Auburn"
    python cli.py complete-round 1
    python cli.py status
"""

import argparse
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from models.errors import BracketError, InvalidPick

logger = logging.getLogger("cli")


def _bracket_path(args) -> str:
    return os.path.join(args.data_dir, config.BRACKET_FILE)


def _results_path(args) -> str:
    return os.path.join(args.data_dir, config.RESULTS_FILE)


def _load_regions(path: str | None):
    from ingestion.regions_loader import load_regions_from_csv, load_regions_from_json
    path = path or config.DEFAULT_REGIONS_FILE
    if path.lower().endswith(".csv"):
        return load_regions_from_csv(path)
    return load_regions_from_json(path)


def _load_bracket(args):
    from ingestion.bracket_store import load_bracket
    path = _bracket_path(args)
    if not os.path.exists(path):
        print("ERROR: No bracket yet. Run 'python cli.py init' first.")
        return None
    return load_bracket(path)


def _load_results(args):
    from engine.results import new_tournament
    from ingestion.bracket_store import load_results
    path = _results_path(args)
    if os.path.exists(path):
        return load_results(path)
    return new_tournament(_load_regions(args.regions))


def _resolve_team(bracket, matchup_id: int, name: str):
    """Match a team name (case-insensitive) against the two teams in a matchup."""
    matchup = bracket.get(matchup_id)
    if matchup is None:
        raise InvalidPick(f"No matchup with id {matchup_id}", matchup_id=matchup_id)
    for team in (matchup.team_a, matchup.team_b):
        if team is not None and team.name.lower() == name.strip().lower():
            return team
    raise InvalidPick(f"{name} is not playing in matchup {matchup_id} ({matchup})",
                      matchup_id=matchup_id)


# --- Commands ---

def cmd_init(args):
    """Start a new bracket from the seeded field."""
    from engine.seeding import build
    from ingestion.bracket_store import save_bracket

    regions = _load_regions(args.regions)
    bracket = build(regions)
    save_bracket(bracket, _bracket_path(args))
    print(f"New bracket: {len(regions.teams)} teams in {len(regions)} regions, {len(bracket)} matchups")


def cmd_pick(args):
    """Pick the winner of one matchup."""
    from engine.picks import select_winner
    from ingestion.bracket_store import save_bracket

    bracket = _load_bracket(args)
    if bracket is None:
        return
    team = _resolve_team(bracket, args.matchup_id, args.team)
    bracket = select_winner(bracket, args.matchup_id, team)
    save_bracket(bracket, _bracket_path(args))

    matchup = bracket.get(args.matchup_id)
    print(f"Matchup {matchup.id}: {team} advances", end="")
    if matchup.next_matchup_id is not None:
        print(f" to matchup {matchup.next_matchup_id}")
    else:
        print(" and wins the championship")


def cmd_autofill(args):
    """Fill every pick automatically."""
    from engine.autofill import auto_fill
    from ingestion.bracket_store import save_bracket

    bracket = _load_bracket(args)
    if bracket is None:
        return
    bracket = auto_fill(bracket, args.strategy, seed=args.seed)
    save_bracket(bracket, _bracket_path(args))
    print(f"Filled bracket with {args.strategy} picks. Champion: {bracket.champion}")


def cmd_validate(args):
    """Report rounds that still need picks."""
    from output.printer import print_validation

    bracket = _load_bracket(args)
    if bracket is None:
        return
    print_validation(bracket)


def cmd_show(args):
    """Display the bracket."""
    from output.printer import print_bracket

    bracket = _load_bracket(args)
    if bracket is None:
        return
    print_bracket(bracket, args.round)


def cmd_clear(args):
    """Clear all picks."""
    from engine.picks import clear_picks
    from ingestion.bracket_store import save_bracket

    bracket = _load_bracket(args)
    if bracket is None:
        return
    save_bracket(clear_picks(bracket), _bracket_path(args))
    print("Cleared all picks.")


def cmd_result(args):
    """Record the real winner of a game."""
    from engine.results import record_result
    from ingestion.bracket_store import save_results

    tournament = _load_results(args)
    team = _resolve_team(tournament.results, args.matchup_id, args.team)
    tournament = record_result(tournament, args.matchup_id, team)
    save_results(tournament, _results_path(args))
    print(f"Result recorded: {team} won matchup {args.matchup_id}")


def cmd_complete_round(args):
    """Mark a round of the real tournament as finished."""
    from engine.results import mark_round_complete
    from ingestion.bracket_store import save_results

    tournament = _load_results(args)
    tournament = mark_round_complete(tournament, args.round)
    save_results(tournament, _results_path(args))
    print(f"{config.ROUND_NAMES[args.round]} marked complete")


def cmd_status(args):
    """Show team status and how the saved bracket is doing."""
    from output.printer import print_pick_summary, print_team_status

    tournament = _load_results(args)
    print_team_status(tournament)

    if os.path.exists(_bracket_path(args)):
        print()
        print_pick_summary(_load_bracket(args), tournament)


# --- Main ---

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Tournament bracket pool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Workflow:
  1. python cli.py init                          # Seed a new bracket
  2. python cli.py pick 0 Auburn                 # Pick winners game by game
     python cli.py autofill --strategy favorites # ...or fill everything at once
  3. python cli.py validate                      # Check nothing is missing
  4. python cli.py result 0 Auburn               # Track the real tournament
  5. python cli.py status                        # See how the picks hold up
        """
    )
    parser.add_argument("--data-dir", default=config.DATA_DIR, help="Where bracket state is kept")
    parser.add_argument("--regions", help="Regions file (JSON or CSV); defaults to the bundled field")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("init", help="Start a new bracket")

    p_pick = subparsers.add_parser("pick", help="Pick the winner of a matchup")
    p_pick.add_argument("matchup_id", type=int)
    p_pick.add_argument("team", help="Team name")

    p_auto = subparsers.add_parser("autofill", help="Fill every pick automatically")
    p_auto.add_argument("--strategy", choices=["random", "favorites"], default="favorites")
    p_auto.add_argument("--seed", type=int, help="Random seed (for --strategy random)")

    subparsers.add_parser("validate", help="Report rounds that still need picks")

    p_show = subparsers.add_parser("show", help="Display the bracket")
    p_show.add_argument("--round", type=int, choices=sorted(config.GAMES_PER_ROUND))

    subparsers.add_parser("clear", help="Clear all picks")

    p_result = subparsers.add_parser("result", help="Record a real game result")
    p_result.add_argument("matchup_id", type=int)
    p_result.add_argument("team", help="Winning team name")

    p_complete = subparsers.add_parser("complete-round", help="Mark a real round as finished")
    p_complete.add_argument("round", type=int, choices=sorted(config.GAMES_PER_ROUND))

    subparsers.add_parser("status", help="Show team status and pick results")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=config.LOG_FORMAT)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "init": cmd_init,
        "pick": cmd_pick,
        "autofill": cmd_autofill,
        "validate": cmd_validate,
        "show": cmd_show,
        "clear": cmd_clear,
        "result": cmd_result,
        "complete-round": cmd_complete_round,
        "status": cmd_status,
    }

    try:
        commands[args.command](args)
    except BracketError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"ERROR: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
