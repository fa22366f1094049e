"""genobreed: genetic breeding of linear instruction programs."""
from .breeder import BreederSettings, BreedingReport, SimpleBreeder
from .instructions import Instruction, InstructionList, TerminateInstructionList
from .mutator import Mutator, MutatorSettings, RandomMutator
from .population import Population, Robot, RobotInfo

__all__ = [
    "BreederSettings",
    "BreedingReport",
    "SimpleBreeder",
    "Instruction",
    "InstructionList",
    "TerminateInstructionList",
    "Mutator",
    "MutatorSettings",
    "RandomMutator",
    "Population",
    "Robot",
    "RobotInfo",
]
