"""Robot instruction set."""
from .instruction import (
    INSTRUCTION_TYPES,
    AddDoubleToVariable,
    AddVariableToVariable,
    DecrementVariable,
    DivideVariableByVariable,
    IncrementVariable,
    Instruction,
    MoveDoubleToVariable,
    MoveVariableToVariable,
    MultiplyVariableByDouble,
    MultiplyVariableByVariable,
    ReturnVariableAsResult,
    SubtractVariableFromVariable,
    TerminateInstructionList,
    VarDoubleInstruction,
    VarInstruction,
    VarVarInstruction,
    ZeroVariable,
    instruction_from_dict,
)
from .instruction_list import InstructionList

__all__ = [
    "INSTRUCTION_TYPES",
    "AddDoubleToVariable",
    "AddVariableToVariable",
    "DecrementVariable",
    "DivideVariableByVariable",
    "IncrementVariable",
    "Instruction",
    "InstructionList",
    "MoveDoubleToVariable",
    "MoveVariableToVariable",
    "MultiplyVariableByDouble",
    "MultiplyVariableByVariable",
    "ReturnVariableAsResult",
    "SubtractVariableFromVariable",
    "TerminateInstructionList",
    "VarDoubleInstruction",
    "VarInstruction",
    "VarVarInstruction",
    "ZeroVariable",
    "instruction_from_dict",
]
