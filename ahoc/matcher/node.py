"""
Automaton state for the Aho-Corasick matcher.

A node holds its outgoing transitions keyed by token, a single failure
reference and the output accumulated for it. Nodes carry no matching
behavior of their own; the Automaton drives construction and traversal.
"""

import copy
from typing import Any, Dict, Hashable, Optional

from ahoc.matcher.error_handler import TransitionExistsError
from ahoc.utils.logging_config import get_logger

# Module logger
logger = get_logger(__name__)

Token = Hashable


class Node:
    """
    A single Aho-Corasick state.

    Attributes:
        transitions: Every explicit transition out of this state. Holds the
            trie edges and, after a DFA build, the failure-derived edges.
        children: Trie edges created by ``add_child`` only. Always a subset
            of ``transitions``; these are the nodes this state owns.
        failure: State for the longest proper suffix of this state's path
            that is also a path from the root. ``None`` on the root.
        pattern_output: Output registered for a pattern ending exactly here.
        output: ``pattern_output`` merged with the failure state's output.
            ``None`` means the state reports nothing.
        default: Target for tokens without an explicit transition. Only set
            in DFA mode.
        state_id: Creation order, the root being 0.
    """

    __slots__ = (
        "transitions", "children", "failure", "pattern_output",
        "output", "default", "state_id",
    )

    def __init__(self, state_id: Optional[int] = None):
        self.transitions: Dict[Token, "Node"] = {}
        self.children: Dict[Token, "Node"] = {}
        self.failure: Optional["Node"] = None
        self.pattern_output: Any = None
        self.output: Any = None
        self.default: Optional["Node"] = None
        self.state_id = state_id

    def transition(self, token: Token) -> Optional["Node"]:
        """Return the explicit target for ``token``, falling back to ``default``."""
        target = self.transitions.get(token)
        if target is None:
            return self.default
        return target

    def has_transition(self, token: Token) -> bool:
        """Explicit transition test; never consults ``default``."""
        return token in self.transitions

    def add_child(self, token: Token, state_id: Optional[int] = None) -> "Node":
        """
        Create and register a child state for ``token``.

        Callers check ``children`` first to decide between following an edge
        and creating one. A failure-derived transition for ``token`` is
        replaced by the new trie edge.

        Raises:
            TransitionExistsError: If a child for ``token`` already exists
        """
        if token in self.children:
            logger.error(f"State {self.state_id}: refusing to replace child for {token!r}")
            raise TransitionExistsError(token, self.state_id)

        child = Node(state_id)
        self.children[token] = child
        self.transitions[token] = child
        return child

    def set_transition(self, token: Token, node: "Node") -> bool:
        """
        Install an explicit transition unless one already exists.

        The first writer wins, so trie edges keep priority over
        failure-derived ones. Returns True if the transition was installed.
        """
        if token in self.transitions:
            return False
        self.transitions[token] = node
        return True

    def reset(self) -> None:
        """
        Drop everything build derived, keeping trie edges and registered output.

        ``output`` gets its own shallow copy so a merge that extends it in
        place never reaches ``pattern_output``.
        """
        self.transitions = dict(self.children)
        self.default = None
        self.output = copy.copy(self.pattern_output)

    @property
    def is_accepting(self) -> bool:
        return self.output is not None

    def __repr__(self) -> str:
        failure_id = self.failure.state_id if self.failure is not None else None
        return (f"Node(id={self.state_id}, transitions={len(self.transitions)}, "
                f"failure={failure_id}, output={self.output!r})")
