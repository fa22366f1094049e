import pytest

from genobreed.instructions import (
    INSTRUCTION_TYPES,
    AddDoubleToVariable,
    DecrementVariable,
    IncrementVariable,
    InstructionList,
    MoveVariableToVariable,
    TerminateInstructionList,
    ZeroVariable,
    instruction_from_dict,
)


def test_copy_is_independent(scripted_mutator):
    original = AddDoubleToVariable(variable=3, value=0.25)
    clone = original.copy()
    assert clone == original
    assert clone is not original
    clone.mutate(scripted_mutator(ints=[11], doubles=[0.75]))
    assert clone == AddDoubleToVariable(variable=11, value=0.75)
    assert original == AddDoubleToVariable(variable=3, value=0.25)


def test_mutate_keeps_variant(scripted_mutator):
    instruction = MoveVariableToVariable(source=1, target=2)
    instruction.mutate(scripted_mutator(ints=[-5, 8]))
    assert type(instruction) is MoveVariableToVariable
    assert (instruction.source, instruction.target) == (-5, 8)


def test_terminator_mutation_draws_nothing(scripted_mutator):
    mutator = scripted_mutator()
    TerminateInstructionList().mutate(mutator)
    assert mutator.calls == []


def test_variants_with_same_operands_differ():
    assert IncrementVariable(variable=1) != DecrementVariable(variable=1)


def test_every_variant_serializes():
    for cls in INSTRUCTION_TYPES:
        instruction = cls()
        assert instruction_from_dict(instruction.to_dict()) == instruction


def test_unknown_op_rejected():
    with pytest.raises(ValueError):
        instruction_from_dict({"op": "FormatDisk"})


def test_out_of_range_read_yields_terminator():
    program = InstructionList([ZeroVariable(variable=1)])
    assert program.get_instruction(0) == ZeroVariable(variable=1)
    assert isinstance(program.get_instruction(1), TerminateInstructionList)
    assert isinstance(program.get_instruction(-1), TerminateInstructionList)


def test_instruction_list_copy_does_not_alias():
    program = InstructionList([IncrementVariable(variable=1), ZeroVariable(variable=2)])
    clone = program.copy()
    assert clone == program
    clone.get_instruction(0).variable = 42
    assert program.get_instruction(0).variable == 1


def test_instruction_list_json_form():
    program = InstructionList([AddDoubleToVariable(variable=2, value=1.5), TerminateInstructionList()])
    data = program.to_list()
    assert data[0] == {"op": "AddDoubleToVariable", "variable": 2, "value": 1.5}
    assert data[1] == {"op": "TerminateInstructionList"}
    assert InstructionList.from_list(data) == program
