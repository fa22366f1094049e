"""Population breeding."""
from .breeder import RANDOM_PROGRAM_MAX_LENGTH, BreederSettings, BreedingReport, SimpleBreeder

__all__ = ["RANDOM_PROGRAM_MAX_LENGTH", "BreederSettings", "BreedingReport", "SimpleBreeder"]
