"""Bracket persistence.

Brackets are stored as JSON in the shape outside consumers read:
{"1": [matchup, ...], ..., "6": [matchup]}, with camelCase matchup fields and
the numeric matchup ids unchanged.
"""

import json
import logging
import os

from engine.validation import check_structure
from engine.results import TournamentResults
from models.bracket import BracketData
from models.errors import InvalidInput

logger = logging.getLogger(__name__)


def bracket_from_json(data: dict) -> BracketData:
    """Parse and structurally check a stored bracket.

    Raises:
        InvalidInput: missing fields or a broken layout
    """
    bracket = _parse(BracketData.from_dict, data, "bracket")
    _check(bracket)
    return bracket


def save_bracket(bracket: BracketData, filepath: str):
    _write_json(bracket.to_dict(), filepath)
    logger.info("Saved bracket to %s", filepath)


def load_bracket(filepath: str) -> BracketData:
    bracket = bracket_from_json(_read_json(filepath))
    logger.info("Loaded bracket from %s", filepath)
    return bracket


def save_results(tournament: TournamentResults, filepath: str):
    _write_json(tournament.to_dict(), filepath)
    logger.info("Saved tournament results to %s", filepath)


def load_results(filepath: str) -> TournamentResults:
    tournament = _parse(TournamentResults.from_dict, _read_json(filepath), "results")
    _check(tournament.results)
    logger.info("Loaded tournament results from %s", filepath)
    return tournament


def _parse(from_dict, data, what: str):
    try:
        return from_dict(data)
    except InvalidInput:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidInput(f"Malformed {what} data: {exc}") from exc


def _check(bracket: BracketData):
    problems = check_structure(bracket)
    if problems:
        raise InvalidInput("Invalid bracket: " + "; ".join(problems))


def _read_json(filepath: str) -> dict:
    with open(filepath, "r", encoding="utf-8") as f:
        return json.load(f)


def _write_json(data: dict, filepath: str):
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
