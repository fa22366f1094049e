"""Entropy source driving every probabilistic breeding decision."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np

from genobreed.instructions import INSTRUCTION_TYPES, Instruction

INT_MIN = -(2**31)
INT_BOUND = 2**31


class Mutator(Protocol):
    """Sequential draw stream. Every call consumes entropy."""

    def next_int(self) -> int: ...

    def next_double(self) -> float: ...

    def random_instruction(self) -> Instruction: ...

    def skip_next_instruction(self) -> bool: ...

    def allow_instruction_mutation(self) -> bool: ...

    def allow_new_instruction(self) -> bool: ...


@dataclass(frozen=True)
class MutatorSettings:
    instruction_mutation_probability: float = 0.01
    new_instruction_probability: float = 0.01
    skip_instruction_probability: float = 0.01


class RandomMutator:
    """``Mutator`` backed by a numpy ``Generator``.

    One instance must not be shared between concurrent breeding passes: the
    order of draws is what makes a run reproducible.
    """

    def __init__(self, settings: MutatorSettings, rng: np.random.Generator):
        self.settings = settings
        self.rng = rng

    def next_int(self) -> int:
        return int(self.rng.integers(INT_MIN, INT_BOUND))

    def next_double(self) -> float:
        return float(self.rng.random())

    def random_instruction(self) -> Instruction:
        index = int(self.rng.integers(len(INSTRUCTION_TYPES)))
        instruction = INSTRUCTION_TYPES[index]()
        instruction.mutate(self)
        return instruction

    def skip_next_instruction(self) -> bool:
        return self.next_double() < self.settings.skip_instruction_probability

    def allow_instruction_mutation(self) -> bool:
        return self.next_double() < self.settings.instruction_mutation_probability

    def allow_new_instruction(self) -> bool:
        return self.next_double() < self.settings.new_instruction_probability
