# ahoc/matcher/__init__.py

from .error_handler import (
    AutomatonError,
    InvalidConfigurationError,
    TransitionExistsError,
    AutomatonNotBuiltError,
)
from .node import Node
from .automaton import Automaton, AutomatonType, Match, merge_outputs

__all__ = [
    'Automaton',
    'Match',
    'merge_outputs',
    'Node',
    'AutomatonError',
    'InvalidConfigurationError',
    'TransitionExistsError',
    'AutomatonNotBuiltError',
]
