# ahoc/config/__init__.py

from .automaton_config import AutomatonConfig, AutomatonType

__all__ = [
    'AutomatonConfig',
    'AutomatonType',
]
