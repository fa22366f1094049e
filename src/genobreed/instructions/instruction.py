"""Closed instruction set for robot programs."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any, Dict, Type

if TYPE_CHECKING:
    from genobreed.mutator import Mutator
    from genobreed.processor import Processor


class Instruction:
    """Base class for every program unit.

    Variants keep their operands as plain scalars, so ``copy`` is a value copy
    and a child program never aliases its parents' instructions.
    """

    def mutate(self, mutator: "Mutator") -> None:
        raise NotImplementedError

    def copy(self) -> "Instruction":
        return replace(self)

    def execute(self, processor: "Processor") -> None:
        processor.execute(self)

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        return {"op": type(self).__name__, **data}


@dataclass
class TerminateInstructionList(Instruction):
    """Sentinel: halts execution and any list copy that reaches it."""

    def mutate(self, mutator: "Mutator") -> None:
        return None


@dataclass
class VarInstruction(Instruction):
    variable: int = 0

    def mutate(self, mutator: "Mutator") -> None:
        self.variable = mutator.next_int()


@dataclass
class IncrementVariable(VarInstruction):
    pass


@dataclass
class DecrementVariable(VarInstruction):
    pass


@dataclass
class ZeroVariable(VarInstruction):
    pass


@dataclass
class ReturnVariableAsResult(VarInstruction):
    pass


@dataclass
class VarDoubleInstruction(Instruction):
    variable: int = 0
    value: float = 0.0

    def mutate(self, mutator: "Mutator") -> None:
        self.variable = mutator.next_int()
        self.value = mutator.next_double()


@dataclass
class AddDoubleToVariable(VarDoubleInstruction):
    pass


@dataclass
class MoveDoubleToVariable(VarDoubleInstruction):
    pass


@dataclass
class MultiplyVariableByDouble(VarDoubleInstruction):
    pass


@dataclass
class VarVarInstruction(Instruction):
    source: int = 0
    target: int = 0

    def mutate(self, mutator: "Mutator") -> None:
        self.source = mutator.next_int()
        self.target = mutator.next_int()


@dataclass
class AddVariableToVariable(VarVarInstruction):
    pass


@dataclass
class SubtractVariableFromVariable(VarVarInstruction):
    pass


@dataclass
class MultiplyVariableByVariable(VarVarInstruction):
    pass


@dataclass
class DivideVariableByVariable(VarVarInstruction):
    pass


@dataclass
class MoveVariableToVariable(VarVarInstruction):
    pass


INSTRUCTION_TYPES: tuple[Type[Instruction], ...] = (
    IncrementVariable,
    DecrementVariable,
    ZeroVariable,
    ReturnVariableAsResult,
    AddDoubleToVariable,
    MoveDoubleToVariable,
    MultiplyVariableByDouble,
    AddVariableToVariable,
    SubtractVariableFromVariable,
    MultiplyVariableByVariable,
    DivideVariableByVariable,
    MoveVariableToVariable,
    TerminateInstructionList,
)

_BY_NAME: Dict[str, Type[Instruction]] = {cls.__name__: cls for cls in INSTRUCTION_TYPES}


def instruction_from_dict(data: Dict[str, Any]) -> Instruction:
    payload = dict(data)
    op = payload.pop("op", None)
    cls = _BY_NAME.get(op)
    if cls is None:
        raise ValueError(f"unknown instruction op: {op!r}")
    return cls(**payload)
