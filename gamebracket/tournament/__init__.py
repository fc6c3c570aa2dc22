from .bracket_state import BracketStateMachine
from .victor import get_loser, get_victor, get_winner

__all__ = ["BracketStateMachine", "get_loser", "get_victor", "get_winner"]
