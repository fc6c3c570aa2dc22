"""Errors raised by the pairing and bracket engine.

Every error here is fatal for the round being computed: the command that hit
it aborts and nothing from that round is written to disk.
"""


class TournamentError(RuntimeError):
    """Base class for pairing and bracket failures."""


class UnevenCountError(TournamentError, ValueError):
    """Raised when an odd number of games is handed to the pairing engine."""


class NoOpponentFoundError(TournamentError):
    """Raised when the weighted draw selects no candidate."""


class MissingSeedDataError(TournamentError):
    """Raised when a round needs a pairings/results file that does not exist."""


class UndefinedGameError(TournamentError):
    """Raised when a bracket slot or game id cannot be resolved."""


class BracketCompleteError(TournamentError):
    """Raised when advancing a bracket whose final is already recorded."""


class IncompleteResultError(TournamentError):
    """Raised when a vote result is missing votes or a usable tie-break."""
