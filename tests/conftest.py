"""Test configuration for local imports without installing the package."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure():
    """Ensure the src/ directory is importable for tests."""
    root = Path(__file__).resolve().parents[1] / "src"
    sys.path.insert(0, str(root))


class ScriptedMutator:
    """Mutator whose draws come from fixed sequences.

    Gates accept either a constant or a list consumed one value per call.
    Exhausted sequences fall back to 0 / 0.0 / False.
    """

    def __init__(self, ints=(), doubles=(), skip=False, new=False, mutation=False):
        self.ints = list(ints)
        self.doubles = list(doubles)
        self.skip = skip
        self.new = new
        self.mutation = mutation
        self.calls: list[str] = []

    def next_int(self) -> int:
        self.calls.append("int")
        return self.ints.pop(0) if self.ints else 0

    def next_double(self) -> float:
        self.calls.append("double")
        return self.doubles.pop(0) if self.doubles else 0.0

    def random_instruction(self):
        from genobreed.instructions import IncrementVariable

        self.calls.append("instruction")
        return IncrementVariable(variable=99)

    @staticmethod
    def _gate(value) -> bool:
        if isinstance(value, list):
            return value.pop(0) if value else False
        return bool(value)

    def skip_next_instruction(self) -> bool:
        self.calls.append("skip")
        return self._gate(self.skip)

    def allow_new_instruction(self) -> bool:
        self.calls.append("new")
        return self._gate(self.new)

    def allow_instruction_mutation(self) -> bool:
        self.calls.append("mutate")
        return self._gate(self.mutation)


@pytest.fixture
def scripted_mutator():
    return ScriptedMutator
