# ahoc/executor/dataframe_lookup.py

import logging

import pandas as pd
from typing import Any, Callable, Iterable, Optional, Union

from ahoc.config.automaton_config import AutomatonConfig, AutomatonType
from ahoc.matcher.automaton import Automaton, OutputBuilder, OutputCombine, OutputMerge
from ahoc.utils.logging_config import get_logger, PerformanceTimer

# Module logger
logger = get_logger(__name__)

Tokenizer = Callable[[Any], Iterable[Any]]


def build_automaton(patterns: Iterable[Iterable[Any]],
                    automaton_type: Union[AutomatonType, str, None] = None,
                    output_builder: Optional[OutputBuilder] = None,
                    output_merge: Optional[OutputMerge] = None,
                    config: Optional[AutomatonConfig] = None) -> Automaton:
    """
    Register every pattern of ``patterns`` and build the automaton.

    Args:
        patterns: Iterable of patterns, each a finite iterable of tokens
        automaton_type: NFA (default) or DFA
        output_builder: Forwarded to ``Automaton.add`` for every pattern
        output_merge: Forwarded to ``Automaton.build``
        config: Optional automaton configuration

    Returns:
        A built Automaton
    """
    automaton = Automaton(automaton_type, config=config)
    for pattern in patterns:
        automaton.add(pattern, output_builder)
    automaton.build(output_merge)
    return automaton


def _is_missing(value: Any) -> bool:
    return pd.api.types.is_scalar(value) and pd.isna(value)


def _has_matches(value: Any) -> bool:
    # Accumulators may be arrays or frames, which have no truth value
    if pd.api.types.is_list_like(value):
        return len(value) > 0
    return bool(value)


def lookup_series(automaton: Automaton, series: pd.Series,
                  tokenizer: Optional[Tokenizer] = None,
                  initial_factory: Optional[Callable[[], Any]] = None,
                  combine: Optional[OutputCombine] = None) -> pd.Series:
    """
    Run ``Automaton.lookup`` on every value of a Series.

    Missing values are not scanned and yield the initial accumulator.
    ``initial_factory`` is called once per row so rows never share a
    mutable accumulator.

    Args:
        automaton: A built automaton
        series: Values to scan
        tokenizer: Turns a value into its token sequence. Values are scanned
            as-is when omitted (a string scans character by character).
        initial_factory: Returns the starting accumulator for one row.
            Defaults to an empty list.
        combine: Forwarded to ``Automaton.lookup``

    Returns:
        Object Series aligned with ``series`` holding one accumulator per row
    """
    results = []

    with PerformanceTimer(f"lookup over {len(series)} rows"):
        for value in series:
            initial = initial_factory() if initial_factory is not None else []
            if _is_missing(value):
                results.append(initial)
                continue

            target = tokenizer(value) if tokenizer is not None else value
            results.append(automaton.lookup(target, initial, combine))

    return pd.Series(results, index=series.index, name=series.name, dtype=object)


def lookup_column(automaton: Automaton, df: pd.DataFrame, column: str,
                  output_column: str = "matches",
                  tokenizer: Optional[Tokenizer] = None,
                  initial_factory: Optional[Callable[[], Any]] = None,
                  combine: Optional[OutputCombine] = None) -> pd.DataFrame:
    """
    Scan one DataFrame column and return a copy of ``df`` with the results
    stored in ``output_column``.

    Raises:
        KeyError: If ``column`` is not in ``df``
    """
    if column not in df.columns:
        logger.error(f"Column '{column}' not found; available columns: {list(df.columns)}")
        raise KeyError(f"Column '{column}' not found in DataFrame")

    result = df.copy()
    result[output_column] = lookup_series(
        automaton, df[column],
        tokenizer=tokenizer,
        initial_factory=initial_factory,
        combine=combine,
    )

    if logger.isEnabledFor(logging.DEBUG):
        matched_rows = sum(1 for value in result[output_column] if _has_matches(value))
        logger.debug(f"Column '{column}': {matched_rows} of {len(result)} rows matched")
    return result
