"""Interactive terminal prompts."""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional


class PromptCancelled(Exception):
    """Raised when the user aborts an interactive prompt."""


@dataclass
class Choice:
    """One selectable option of a menu."""

    title: str
    value: Any
    description: Optional[str] = None


class Prompter:
    """Numbered menus and bounded integer input on stdin/stdout."""

    def __init__(self, input_func: Callable[[str], str] = input, output_func: Callable[[str], None] = print):
        self.input_func = input_func
        self.output_func = output_func

    def _ask(self, message: str) -> str:
        try:
            return self.input_func(message).strip()
        except (EOFError, KeyboardInterrupt):
            raise PromptCancelled("User cancelled entry, cannot continue")

    def choose(self, message: str, choices: List[Choice], initial: int = 0) -> Any:
        """
        Show a numbered menu and return the value of the selected choice.

        An empty answer selects ``initial``; ``q`` cancels.
        """
        if not choices:
            raise ValueError("choose() needs at least one choice")
        self.output_func(f"\n{message}")
        for number, choice in enumerate(choices, start=1):
            line = f"  {number}) {choice.title}"
            if choice.description:
                line += f" - {choice.description}"
            self.output_func(line)

        while True:
            answer = self._ask(f"Select [1-{len(choices)}] (default {initial + 1}, q to cancel): ")
            if answer.lower() == "q":
                raise PromptCancelled("User cancelled selection")
            if not answer:
                return choices[initial].value
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1].value
            self.output_func("Invalid selection.")

    def vote_count(self, message: str, minimum: int, maximum: int, initial: int = 0) -> int:
        """Ask for an integer in [minimum, maximum]; an empty answer gives ``initial``."""
        while True:
            answer = self._ask(f"{message} [{minimum}-{maximum}] (default {initial}): ")
            if answer.lower() == "q":
                raise PromptCancelled("User cancelled entry, cannot continue")
            if not answer:
                return initial
            try:
                value = int(answer)
            except ValueError:
                self.output_func("Please enter a whole number.")
                continue
            if minimum <= value <= maximum:
                return value
            self.output_func(f"Votes must be between {minimum} and {maximum}.")
