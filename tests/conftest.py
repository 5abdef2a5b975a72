"""
Pytest fixtures for the automaton tests.
"""

import os
import sys

import pytest
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ahoc.matcher.automaton import Automaton


@pytest.fixture(params=["NFA", "DFA"])
def automaton_type(request):
    """Run a test once per automaton form."""
    return request.param


@pytest.fixture
def classic_words():
    """The textbook pattern set."""
    return ["he", "she", "his", "hers"]


@pytest.fixture
def integer_patterns():
    """Patterns over integer tokens."""
    return [
        [1, 2, 3],
        [2, 1, 4],
        [2, 1, 4, 3],
        [5, 6, 2, 4],
        [2, 1, 4, 3, 8, 9],
    ]


@pytest.fixture
def make_automaton():
    """Factory registering patterns and building an automaton."""
    def _make(patterns: Iterable[Any], automaton_type: Optional[str] = None,
              output_builder=None, output_merge=None) -> Automaton:
        automaton = Automaton(automaton_type)
        for pattern in patterns:
            automaton.add(pattern, output_builder)
        automaton.build(output_merge)
        return automaton
    return _make


@pytest.fixture
def naive_matches():
    """
    Reference matcher: for every end position, the patterns ending there.

    Returns a dict mapping exclusive end index to the sorted list of patterns.
    """
    def _naive(patterns: Sequence[Tuple[Any, ...]], target: Sequence[Any]) -> Dict[int, List[Tuple[Any, ...]]]:
        target = tuple(target)
        found: Dict[int, List[Tuple[Any, ...]]] = {}
        for end in range(1, len(target) + 1):
            hits = [p for p in patterns if len(p) <= end and target[end - len(p):end] == tuple(p)]
            if hits:
                found[end] = sorted(hits)
        return found
    return _naive


def find_state(automaton: Automaton, path: Iterable[Any]):
    """Follow trie edges from the root along ``path``."""
    node = automaton.root
    for token in path:
        node = node.children[token]
    return node


@pytest.fixture
def state_at():
    return find_state
