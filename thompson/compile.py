import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .automatons import NFA, Simulation
from .pattern import CompileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompileFailure:
    """
    Result of :func:`compile` when the pattern is malformed, there is no
    automaton to draw nor to simulate. Always falsy.
    """

    pattern: str
    error: CompileError

    @property
    def reason(self) -> str:
        return str(self.error)

    def __bool__(self):
        return False


def compile(pattern: str, alphabet: Optional[Iterable[str]] = None) -> Union[NFA, CompileFailure]:
    """Compile the pattern into an automaton, never raise on malformed patterns"""
    try:
        return NFA.from_pattern(pattern, alphabet)
    except CompileError as exc:
        logger.debug("cannot compile %r: %s", pattern, exc)
        return CompileFailure(pattern, exc)


def simulate(automaton: NFA, string: str) -> Simulation:
    """Active states and verdict after reading the whole string"""
    return automaton.simulate(string)
