# ahoc/matcher/error_handler.py

from typing import Any


class AutomatonError(Exception):
    """Base class for every error raised by the automaton package."""


class InvalidConfigurationError(AutomatonError, ValueError):
    """Raised when an automaton is requested with an unknown mode."""
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Only 'DFA' or 'NFA' accepted as automaton type, got {value!r}")


class TransitionExistsError(AutomatonError, KeyError):
    """Raised when a child is added for a token that already has a transition."""
    def __init__(self, token: Any, state_id: Any = None):
        self.token = token
        self.state_id = state_id
        super().__init__(f"State {state_id} already has a transition for token {token!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return self.args[0]


class AutomatonNotBuiltError(AutomatonError, RuntimeError):
    """Raised by lookup when build is required but has not run since the last add."""
    def __init__(self, message: str = "Automaton must be built before lookup; call build() after add()"):
        super().__init__(message)
