"""Errors raised by the bracket engine."""


class BracketError(ValueError):
    """Base class for bracket errors."""


class InvalidInput(BracketError):
    """Region data or a persisted bracket does not have the expected shape."""


class InvalidPick(BracketError):
    """A winner was chosen that is not playing in the target matchup."""

    def __init__(self, message: str, matchup_id: int | None = None, team=None):
        super().__init__(message)
        self.matchup_id = matchup_id
        self.team = team
