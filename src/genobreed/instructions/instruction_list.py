"""Ordered program body made of instructions."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List

from .instruction import Instruction, TerminateInstructionList, instruction_from_dict


class InstructionList:
    def __init__(self, instructions: Iterable[Instruction] | None = None):
        self._instructions: List[Instruction] = list(instructions) if instructions is not None else []

    @property
    def size(self) -> int:
        return len(self._instructions)

    def __len__(self) -> int:
        return len(self._instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instructions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InstructionList):
            return NotImplemented
        return self._instructions == other._instructions

    def __repr__(self) -> str:
        return f"InstructionList({self._instructions!r})"

    def add_instruction(self, instruction: Instruction) -> None:
        self._instructions.append(instruction)

    def get_instruction(self, index: int) -> Instruction:
        """Return the instruction at ``index``.

        Reads outside ``[0, size)`` yield a fresh terminator, so walking past
        the end of a program behaves like hitting an explicit terminator.
        """
        if 0 <= index < len(self._instructions):
            return self._instructions[index]
        return TerminateInstructionList()

    def copy(self) -> "InstructionList":
        return InstructionList(instruction.copy() for instruction in self._instructions)

    def to_list(self) -> List[Dict[str, Any]]:
        return [instruction.to_dict() for instruction in self._instructions]

    @classmethod
    def from_list(cls, data: Iterable[Dict[str, Any]]) -> "InstructionList":
        return cls(instruction_from_dict(item) for item in data)
