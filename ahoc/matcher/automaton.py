"""
Aho-Corasick automaton for exact multi-pattern matching.

The automaton locates every occurrence of a finite set of patterns within a
target sequence in a single pass. Patterns and targets are sequences of any
hashable token type: characters of a string, integers, enum members, bytes.

Two forms are supported:
- NFA (default): only the trie edges exist; mismatches are resolved by
  following failure links while scanning. Uses less memory.
- DFA: build materializes every failure-derived transition, so a scan takes
  exactly one transition per token.

Example:
    automaton = Automaton()
    for word in ("he", "she", "his", "hers"):
        automaton.add(word)
    automaton.build()
    automaton.lookup("ushers")   # ['she', 'he', 'hers']

Caller contract: ``build`` must run after the last ``add``. Scanning an
automaton that was never built, or was extended after building, is not an
error; it deterministically reports stale results (an unbuilt state falls
back to the root on every mismatch). Set ``AutomatonConfig.require_build``
to have lookups raise AutomatonNotBuiltError instead.
"""

import copy
import dataclasses
import logging
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union

from ahoc.config.automaton_config import AutomatonConfig, AutomatonType
from ahoc.matcher.error_handler import AutomatonNotBuiltError
from ahoc.matcher.node import Node
from ahoc.utils.logging_config import get_logger, PerformanceTimer

# Module logger
logger = get_logger(__name__)

# Type aliases for better readability
OutputBuilder = Callable[[Any], Any]
OutputMerge = Callable[[Any, Any], Any]
OutputCombine = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class Match:
    """
    Output reported while scanning a target.

    Attributes:
        end: Exclusive end index in the target of every pattern in ``output``
        output: Merged output of the state reached at that position
    """
    end: int
    output: Any


def merge_outputs(own: Any, inherited: Any) -> Any:
    """
    Default merge policy used by build.

    Own patterns come first, followed by the ones inherited from the failure
    state. A state without own output adopts the inherited one.
    """
    if own is not None and inherited is not None:
        return own + inherited
    if inherited is not None:
        return inherited
    return own


class Automaton:
    """
    Aho-Corasick automaton over arbitrary hashable tokens.

    The automaton owns every node created by ``add``; after a DFA build the
    same node may be the target of many transitions, all of which are
    non-owning references.

    Not thread-safe for mutation. Once built, ``lookup`` only reads the node
    graph and may be called concurrently as long as no ``add`` or ``build``
    runs at the same time.
    """

    def __init__(self, automaton_type: Union[AutomatonType, str, None] = None,
                 config: Optional[AutomatonConfig] = None):
        """
        Create an automaton holding only its root state.

        Args:
            automaton_type: ``AutomatonType.NFA`` (default), ``AutomatonType.DFA``
                or their names. Overrides the type held by ``config``.
            config: Optional configuration

        Raises:
            InvalidConfigurationError: If the automaton type is not recognized
        """
        if config is None:
            config = AutomatonConfig(automaton_type=automaton_type)
        elif automaton_type is not None:
            config = dataclasses.replace(config, automaton_type=automaton_type)

        self.config = config
        self.root = Node(state_id=0)
        self._nodes: List[Node] = [self.root]
        self._built = False

        logger.debug(f"Created {self.config.automaton_type.value} automaton")

    @property
    def automaton_type(self) -> AutomatonType:
        return self.config.automaton_type

    @property
    def is_built(self) -> bool:
        """True once build has run and no pattern was added since."""
        return self._built

    @property
    def pattern_count(self) -> int:
        """Number of distinct registered patterns."""
        return sum(1 for node in self._nodes if node.pattern_output is not None)

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, pattern: Iterable[Any], output_builder: Optional[OutputBuilder] = None) -> None:
        """
        Register a pattern.

        Iterables that are not sequences (generators, sets, ...) are read once
        into a tuple, and that tuple is what the output holds.

        Re-adding a pattern replaces its output: the last write wins. An
        empty pattern marks the root as accepting, so it is reported at
        every position.

        Args:
            pattern: Finite iterable of hashable tokens
            output_builder: Called with the pattern; its result becomes the
                pattern's output. Defaults to ``[pattern]``.
        """
        if not isinstance(pattern, Sequence):
            pattern = tuple(pattern)

        node = self.root
        for token in pattern:
            child = node.children.get(token)
            if child is None:
                child = node.add_child(token, state_id=len(self._nodes))
                child.failure = self.root
                self._nodes.append(child)
            node = child

        output = output_builder(pattern) if output_builder is not None else [pattern]
        if node.pattern_output is not None:
            logger.debug(f"State {node.state_id}: replacing output {node.pattern_output!r} with {output!r}")

        node.pattern_output = output
        node.output = copy.copy(output)
        self._built = False

    def build(self, output_merge: Optional[OutputMerge] = None) -> None:
        """
        Compute failure links and merged outputs, then materialize DFA
        transitions when the automaton is a DFA.

        Everything build derives is reset first, so building again without
        an intervening ``add`` gives the same automaton.

        Args:
            output_merge: Called as ``output_merge(own_output, failure_output)``
                once per non-root state; the result becomes the state's output.
                Either argument may be None. Defaults to ``merge_outputs``.
        """
        merge = output_merge if output_merge is not None else merge_outputs

        with PerformanceTimer(f"{self.automaton_type.value} build ({len(self._nodes)} states)"):
            for node in self._nodes:
                node.reset()
            self.root.failure = None

            self._build_failures(merge)
            if self.config.is_dfa:
                self._build_dfa()

        self._built = True
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Built {self.automaton_type.value} automaton: {len(self._nodes)} states, "
                         f"{self.pattern_count} patterns, {self._transition_count()} transitions")

    def _build_failures(self, merge: OutputMerge) -> None:
        """
        Set failure links and outputs in breadth-first order.

        A state's failure target is always shallower, so its output is final
        by the time the state merges it.
        """
        root = self.root
        fifo_q = deque()

        for node in root.children.values():
            node.failure = root
            node.output = merge(node.output, root.output)
            fifo_q.append(node)

        while fifo_q:
            p_node = fifo_q.popleft()
            for token, node in p_node.children.items():
                fifo_q.append(node)

                # Follow failures until a state has a transition for the token
                # or we are back at the root
                f_node = p_node.failure
                while not f_node.has_transition(token) and f_node is not root:
                    f_node = f_node.failure

                if f_node.has_transition(token):
                    node.failure = f_node.transitions[token]
                else:
                    node.failure = root

                node.output = merge(node.output, node.failure.output)

    def _build_dfa(self) -> None:
        """Give every state a total transition function."""
        root = self.root
        root.default = root
        fifo_q = deque(root.children.values())

        while fifo_q:
            node = fifo_q.popleft()
            fifo_q.extend(node.children.values())

            # The failure state is shallower, so its table is already complete
            for token, target in node.failure.transitions.items():
                node.set_transition(token, target)

            node.default = root

    def iter_lookup(self, target: Iterable[Any]) -> Iterator[Match]:
        """
        Scan ``target`` and yield a Match for every position where the
        current state has output.

        Matches come in order of end position. Within one position the
        state's own pattern comes first, then its suffixes, longest first.

        Raises:
            AutomatonNotBuiltError: If ``config.require_build`` is set and
                the automaton was not built since the last add
        """
        if self.config.require_build and not self._built:
            logger.error("Lookup attempted on an automaton that has not been built")
            raise AutomatonNotBuiltError()

        if self._built and self.config.is_dfa:
            return self._scan_dfa(target)
        return self._scan_nfa(target)

    def _scan_nfa(self, target: Iterable[Any]) -> Iterator[Match]:
        root = self.root
        node = root

        for index, token in enumerate(target):
            # Follow the failures until a transition is found
            # or we return to the root
            while not node.has_transition(token) and node is not root:
                node = node.failure

            node = node.transitions.get(token, root)
            if node.output is not None:
                yield Match(index + 1, node.output)

    def _scan_dfa(self, target: Iterable[Any]) -> Iterator[Match]:
        node = self.root

        for index, token in enumerate(target):
            node = node.transition(token)
            if node.output is not None:
                yield Match(index + 1, node.output)

    def lookup(self, target: Iterable[Any], initial: Any = None,
               combine: Optional[OutputCombine] = None) -> Any:
        """
        Find all occurrences of the registered patterns in ``target``.

        Args:
            target: Finite iterable of tokens
            initial: Starting accumulator. Defaults to a new empty list.
            combine: Called as ``combine(accumulator, output)`` for every
                matching position; returns the new accumulator. Defaults to
                ``accumulator + output``.

        Returns:
            The final accumulator, e.g. ``['she', 'he', 'hers']`` for the
            patterns he/she/his/hers over "ushers".
        """
        output = [] if initial is None else initial

        for match in self.iter_lookup(target):
            if combine is not None:
                output = combine(output, match.output)
            else:
                output = output + match.output

        return output

    def _transition_count(self) -> int:
        return sum(len(node.transitions) for node in self._nodes)

    def get_debug_info(self) -> Dict[str, Any]:
        """Summary of the automaton for logging and debugging."""
        return {
            'automaton_type': self.automaton_type.value,
            'is_built': self._built,
            'state_count': len(self._nodes),
            'pattern_count': self.pattern_count,
            'transition_count': self._transition_count(),
            'accepting_states': sum(1 for node in self._nodes if node.is_accepting),
            'require_build': self.config.require_build,
        }

    def __repr__(self) -> str:
        return (f"Automaton(type={self.automaton_type.value}, states={len(self._nodes)}, "
                f"built={self._built})")
