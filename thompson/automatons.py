"""
A Thompson automaton is a non deterministic finite automaton built
from a regular expression by composing one small fragment per operand
and per operator.
"""


import logging
from collections import deque
from contextlib import redirect_stdout
from dataclasses import dataclass
from io import StringIO
from typing import Dict, FrozenSet, Iterable, Iterator, List, NamedTuple, Optional, Set, Union

from .char import EPSILON, Character
from .nodes import State
from .pattern import (
    EmptyPatternError, MalformedAlphabetError, OperandOverflowError,
    OperandUnderflowError, check_alphabet, parse)
from .tokens import Literal, Operator, Token, tokenize, tokens_to_str

logger = logging.getLogger(__name__)


class Fragment(NamedTuple):
    """Entry and unique exit of a sub-expression under construction"""
    start: State
    end: State


class Transition(NamedTuple):
    source: int
    symbol: Character
    target: int


@dataclass(frozen=True)
class Simulation:
    """States active after reading a string, and the match verdict"""

    active_state_ids: FrozenSet[int]
    is_match: bool

    def __bool__(self):
        return self.is_match


class NFA:
    """
    Non Deterministic Finite Automaton

    The automaton owns all its states in the :attr:`states` arena, the
    state identifier is its index in the arena. Transitions reference
    other states of the same arena, loops (from the kleene star) are
    expected.

    The automaton is never modified once built, it is safe to simulate
    it from several threads.
    """

    def __init__(self, initial_node: State, final_node: State, states: List[State]):
        self.initial_node = initial_node
        self.final_node = final_node
        self.states = states

    def __len__(self):
        return len(self.states)

    def __str__(self):
        return "<{} {} states on {}>".format(
            self.__class__.__name__, len(self), self.initial_node)

    @staticmethod
    def _expand(states: Set[State]) -> None:
        """
        Update the current set of states to includes states reached by
        following void transitions on the current (+updated) states
        """
        todo = list(states)
        while todo:
            state = todo.pop()
            for target in state.epsilons:
                if target not in states:
                    states.add(target)
                    todo.append(target)

    @classmethod
    def closure(cls, states: Iterable[State]) -> Set[State]:
        """Epsilon-closure, all states reachable by void transitions"""
        closure = set(states)
        cls._expand(closure)
        return closure

    def steps(self, string: str) -> Iterator[Simulation]:
        """
        Simulate the automaton, yield the simulation of the empty prefix
        then the one of each prefix of ``string``.
        """
        current = self.closure([self.initial_node])
        yield self._snapshot(current)
        for char in string:
            reached = set()
            for state in current:
                reached.update(state.read(char))
            self._expand(reached)
            current = reached
            yield self._snapshot(current)

    def simulate(self, string: str) -> Simulation:
        """Simulate the whole string"""
        simulation = None
        for simulation in self.steps(string):
            pass
        return simulation

    def match(self, string: str) -> bool:
        """Accept or reject the given string"""
        return self.simulate(string).is_match

    @staticmethod
    def _snapshot(states: Set[State]) -> Simulation:
        return Simulation(
            frozenset(state.id for state in states),
            any(state.is_final for state in states))

    def layers(self) -> Dict[int, int]:
        """Breadth-first depth of each state reachable from the start"""
        layers = {self.initial_node.id: 0}
        queue = deque([self.initial_node])
        while queue:
            state = queue.popleft()
            for targets in state.transitions.values():
                for target in targets:
                    if target.id not in layers:
                        layers[target.id] = layers[state.id] + 1
                        queue.append(target)
        return layers

    def transitions(self) -> List[Transition]:
        """All transitions, breadth-first from the start state"""
        layers = self.layers()
        order = sorted(layers, key=lambda id: (layers[id], id))
        return [
            Transition(id, char, target.id)
            for id in order
            for char, targets in self.states[id].transitions.items()
            for target in targets
        ]

    def print_mesh(self) -> None:
        """Pretty print the current automaton"""
        buffer_ = StringIO()

        with redirect_stdout(buffer_):
            for id in self.layers():
                self.states[id].print_transitions()

        # Print transitions targeting the final state at the end
        lines = buffer_.getvalue().splitlines()
        ends = [line for line in lines if line.endswith("-->")]
        print(" " * len(str(self.initial_node)), "-->", self.initial_node)
        for line in lines:
            if not line.endswith("-->"):
                print(line)
        for line in ends:
            print(line)

    @classmethod
    def from_postfix(cls, postfix: Union[str, Iterable[Token]]) -> "NFA":
        """
        Create a NFA using Thompson's construction on a postfix stream of
        tokens, a postfix string is tokenized first.

        Raise :class:`~thompson.pattern.EmptyPatternError` when there is
        nothing to compile, :class:`~thompson.pattern.OperandUnderflowError`
        when an operator lacks operands and
        :class:`~thompson.pattern.OperandOverflowError` when operands are
        left unjoined.
        """
        tokens = tokenize(postfix)
        if not tokens:
            raise EmptyPatternError()

        states = []
        stack = []

        def new_state():
            state = State(len(states))
            states.append(state)
            return state

        def pop(operator, index):
            try:
                return stack.pop()
            except IndexError:
                raise OperandUnderflowError(operator, tokens, index) from None

        def literal(char):
            start = new_state()
            end = new_state()
            start.add(char, end)
            return Fragment(start, end)

        def concat(first, second):
            first.end.is_final = False
            first.end.add(EPSILON, second.start)
            return Fragment(first.start, second.end)

        def union(first, second):
            start = new_state()
            end = new_state()
            for fragment in (first, second):
                start.add(EPSILON, fragment.start)
            for fragment in (first, second):
                fragment.end.is_final = False
                fragment.end.add(EPSILON, end)
            return Fragment(start, end)

        def kleene(fragment):
            start = new_state()
            end = new_state()
            start.add(EPSILON, fragment.start)
            start.add(EPSILON, end)
            fragment.end.is_final = False
            fragment.end.add(EPSILON, fragment.start)
            fragment.end.add(EPSILON, end)
            return Fragment(start, end)

        for index, token in enumerate(tokens):
            if isinstance(token, Literal):
                stack.append(literal(token.char))
            elif token is Operator.STAR:
                stack.append(kleene(pop(token, index)))
            elif token is Operator.CONCAT:
                second = pop(token, index)
                stack.append(concat(pop(token, index), second))
            elif token is Operator.ALTERNATE:
                second = pop(token, index)
                stack.append(union(pop(token, index), second))
            else:
                raise MalformedAlphabetError(token, tokens, index)

        if len(stack) != 1:
            raise OperandOverflowError(len(stack), tokens)

        fragment = stack.pop()
        fragment.end.is_final = True
        logger.debug("compiled %s into %d states", tokens_to_str(tokens), len(states))
        return cls(fragment.start, fragment.end, states)

    @classmethod
    def from_pattern(cls, pattern: str, alphabet: Optional[Iterable[str]] = None) -> "NFA":
        """
        Create a NFA out of a regexp pattern

        Available sequences are:

        * ``()``, group. Used to group expression together, create
          sub-patterns.
        * ``|``, union. Used for choices, match specifically one group
          out of the available choices.
        * ``*``, kleene star. Used for repetition, match the last
          character or group zero, one or multiple times.
        * ``.``, concatenation. Implicit between two operands.

        Every other character is matched as-is. When ``alphabet`` is
        given, any other operand raises
        :class:`~thompson.pattern.MalformedAlphabetError`.
        """
        if alphabet is not None:
            check_alphabet(pattern, alphabet)
        tokens = parse(pattern)
        logger.debug("pattern %r postfix %r", pattern, tokens_to_str(tokens))
        return cls.from_postfix(tokens)


NonDeterministicFiniteAutomaton = NFA
