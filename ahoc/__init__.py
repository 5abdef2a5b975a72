# ahoc/__init__.py
"""
Aho-Corasick automaton for exact multi-pattern matching over any hashable tokens.
"""

# matcher before config: the config module imports matcher.error_handler
from .matcher import *
from .config import *
from .executor import *

__version__ = "0.1.0"

__all__ = (
    matcher.__all__ +
    config.__all__ +
    executor.__all__
)
