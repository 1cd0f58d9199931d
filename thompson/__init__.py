"""Thompson's construction of regular expressions and NFA simulation."""

import logging

from .automatons import NFA, Simulation, Transition
from .compile import CompileFailure, compile, simulate
from .nodes import State
from .pattern import (
    CompileError, EmptyPatternError, MalformedAlphabetError,
    OperandOverflowError, OperandUnderflowError, insert_concat, parse,
    to_postfix)

logging.getLogger(__name__).addHandler(logging.NullHandler())
