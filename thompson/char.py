from string import ascii_letters, digits
from typing import NewType

Character = NewType("Character", str)

EPSILON = Character("")
CONCAT = Character(".")
ALPHANUMERIC = frozenset(ascii_letters + digits)

def char_to_str(char: Character) -> str:
    return {EPSILON: "ε"}.get(char, char)
