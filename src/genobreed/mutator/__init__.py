"""Mutators (entropy sources)."""
from .mutator import Mutator, MutatorSettings, RandomMutator

__all__ = ["Mutator", "MutatorSettings", "RandomMutator"]
