# ahoc/executor/__init__.py

from .dataframe_lookup import build_automaton, lookup_series, lookup_column

__all__ = [
    'build_automaton',
    'lookup_series',
    'lookup_column',
]
