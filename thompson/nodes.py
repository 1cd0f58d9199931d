"""States of a Thompson automaton"""


from collections import defaultdict
from typing import List, MutableMapping
from .char import EPSILON, Character, char_to_str


class State:
    """
    Non deterministic node

    A state accepts void (:data:`~thompson.char.EPSILON`) transitions
    and several transitions on the same character, successors are kept
    in insertion order.
    """

    transitions: MutableMapping[Character, List["State"]]

    def __init__(self, id: int, is_final: bool = False):
        self.id = id
        self.is_final = is_final
        self.transitions = defaultdict(list)

    def __str__(self):
        return "({})".format(self.id)

    def __repr__(self):
        return "<{} {} ({})>".format(
            self.__class__.__name__,
            self.id,
            ", ".join(map(char_to_str, self.transitions)))

    def read(self, char: Character) -> List["State"]:
        return self.transitions.get(char, [])

    def add(self, char: Character, state: "State") -> None:
        self.transitions[char].append(state)

    @property
    def epsilons(self) -> List["State"]:
        return self.read(EPSILON)

    def print_transitions(self) -> None:
        for char, states in self.transitions.items():
            for state in states:
                print(self, char_to_str(char), state, end="")
                print(" -->" if state.is_final else "")

    def __hash__(self):
        return self.id
