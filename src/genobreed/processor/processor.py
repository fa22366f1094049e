"""Register-based virtual processor that runs robot programs."""
from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence, Type

import numpy as np

from genobreed.instructions import (
    AddDoubleToVariable,
    AddVariableToVariable,
    DecrementVariable,
    DivideVariableByVariable,
    IncrementVariable,
    Instruction,
    InstructionList,
    MoveDoubleToVariable,
    MoveVariableToVariable,
    MultiplyVariableByDouble,
    MultiplyVariableByVariable,
    ReturnVariableAsResult,
    SubtractVariableFromVariable,
    TerminateInstructionList,
    ZeroVariable,
)


class Processor:
    def __init__(self, variable_count: int = 256, instruction_limit: int = 256):
        if variable_count <= 0:
            raise ValueError("variable_count must be positive")
        self.variable_count = variable_count
        self.instruction_limit = instruction_limit
        self.variables = np.zeros(variable_count, dtype=np.float64)
        self.result: Optional[float] = None
        self.finished = False
        self._handlers: Dict[Type[Instruction], Callable] = {
            IncrementVariable: self._increment,
            DecrementVariable: self._decrement,
            ZeroVariable: self._zero,
            ReturnVariableAsResult: self._return_result,
            AddDoubleToVariable: self._add_double,
            MoveDoubleToVariable: self._move_double,
            MultiplyVariableByDouble: self._multiply_double,
            AddVariableToVariable: self._add_variable,
            SubtractVariableFromVariable: self._subtract_variable,
            MultiplyVariableByVariable: self._multiply_variable,
            DivideVariableByVariable: self._divide_variable,
            MoveVariableToVariable: self._move_variable,
            TerminateInstructionList: self._terminate,
        }

    def reset(self):
        self.variables[:] = 0.0
        self.result = None
        self.finished = False

    def run(self, program: InstructionList, inputs: Optional[Sequence[float]] = None) -> Optional[float]:
        """Execute ``program`` from a clean register file and return its result.

        ``inputs`` are loaded into the lowest registers before the first instruction.
        """
        self.reset()
        if inputs is not None:
            count = min(len(inputs), self.variable_count)
            self.variables[:count] = np.asarray(inputs, dtype=np.float64)[:count]
        executed = 0
        with np.errstate(all="ignore"):
            for instruction in program:
                if self.finished or executed >= self.instruction_limit:
                    break
                instruction.execute(self)
                executed += 1
        if self.result is None or not np.isfinite(self.result):
            return None
        return self.result

    def execute(self, instruction: Instruction):
        handler = self._handlers.get(type(instruction))
        if handler is None:
            raise TypeError(f"unsupported instruction: {type(instruction).__name__}")
        handler(instruction)

    def _index(self, operand: int) -> int:
        return abs(operand) % self.variable_count

    def _increment(self, instruction):
        self.variables[self._index(instruction.variable)] += 1.0

    def _decrement(self, instruction):
        self.variables[self._index(instruction.variable)] -= 1.0

    def _zero(self, instruction):
        self.variables[self._index(instruction.variable)] = 0.0

    def _return_result(self, instruction):
        self.result = float(self.variables[self._index(instruction.variable)])
        self.finished = True

    def _add_double(self, instruction):
        self.variables[self._index(instruction.variable)] += instruction.value

    def _move_double(self, instruction):
        self.variables[self._index(instruction.variable)] = instruction.value

    def _multiply_double(self, instruction):
        self.variables[self._index(instruction.variable)] *= instruction.value

    def _add_variable(self, instruction):
        self.variables[self._index(instruction.target)] += self.variables[self._index(instruction.source)]

    def _subtract_variable(self, instruction):
        self.variables[self._index(instruction.target)] -= self.variables[self._index(instruction.source)]

    def _multiply_variable(self, instruction):
        self.variables[self._index(instruction.target)] *= self.variables[self._index(instruction.source)]

    def _divide_variable(self, instruction):
        divisor = self.variables[self._index(instruction.source)]
        if divisor != 0.0:
            self.variables[self._index(instruction.target)] /= divisor

    def _move_variable(self, instruction):
        self.variables[self._index(instruction.target)] = self.variables[self._index(instruction.source)]

    def _terminate(self, instruction):
        self.finished = True
