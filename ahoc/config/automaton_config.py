# ahoc/config/automaton_config.py

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ahoc.matcher.error_handler import InvalidConfigurationError
from ahoc.utils.logging_config import get_logger

# Module logger
logger = get_logger(__name__)


class AutomatonType(Enum):
    """Form of the automaton produced by build."""
    NFA = "NFA"
    DFA = "DFA"

    @classmethod
    def from_value(cls, value: Union["AutomatonType", str, None]) -> "AutomatonType":
        """
        Normalize a mode argument.

        ``None`` selects the NFA. Enum members and their exact names are
        accepted; anything else raises InvalidConfigurationError.
        """
        if value is None:
            return cls.NFA
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in cls.__members__:
            return cls[value]
        logger.error(f"Unknown automaton type: {value!r}")
        raise InvalidConfigurationError(value)


@dataclass
class AutomatonConfig:
    """Configuration for automaton construction and lookup"""
    automaton_type: Union[AutomatonType, str, None] = AutomatonType.NFA
    require_build: bool = False

    def __post_init__(self):
        self.automaton_type = AutomatonType.from_value(self.automaton_type)

    @property
    def is_dfa(self) -> bool:
        return self.automaton_type is AutomatonType.DFA
