"""Pydantic config schema and loader."""
from importlib import resources
from pathlib import Path
import yaml
from pydantic import BaseModel, Field, field_validator

from genobreed.breeder import BreederSettings
from genobreed.killer import KillerSettings
from genobreed.mutator import MutatorSettings


def _unit_interval(v: float) -> float:
    if not 0 <= v <= 1:
        raise ValueError("parameters must be within [0, 1]")
    return v


def _non_negative(v: int) -> int:
    if v < 0:
        raise ValueError("counts must be non-negative")
    return v


class PopulationConfig(BaseModel):
    desired_size: int = 1000

    @field_validator("desired_size")
    @classmethod
    def validate_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("desired_size must be positive")
        return v


class BreederConfig(BaseModel):
    random_robots: float = 0.05
    data_maximum_offset: int = 256
    ignore_columns: list[int] = Field(default_factory=list)
    minimum_outcomes_to_allow_breeding: int = 50
    outcomes_between_breeding: int = 50
    inherited_weight_percent: float = 0.0

    @field_validator("random_robots", "inherited_weight_percent")
    @classmethod
    def validate_fraction(cls, v: float) -> float:
        return _unit_interval(v)

    @field_validator("data_maximum_offset", "minimum_outcomes_to_allow_breeding", "outcomes_between_breeding")
    @classmethod
    def validate_counts(cls, v: int) -> int:
        return _non_negative(v)

    @field_validator("ignore_columns", mode="before")
    @classmethod
    def validate_columns(cls, v):
        if isinstance(v, (set, tuple)):
            return sorted(v)
        return v


class MutatorConfig(BaseModel):
    instruction_mutation_probability: float = 0.01
    new_instruction_probability: float = 0.01
    skip_instruction_probability: float = 0.01

    @field_validator("instruction_mutation_probability", "new_instruction_probability", "skip_instruction_probability")
    @classmethod
    def validate_probability(cls, v: float) -> float:
        return _unit_interval(v)


class KillerConfig(BaseModel):
    maximum_death_by_age: float = 0.01
    maximum_death_by_weight: float = 0.1
    probability_of_death_by_age: float = 0.5
    probability_of_death_by_weight: float = 1.0
    protect_robots_until_outcomes: int = 100
    protect_best_robots: float = 0.01
    kill_non_predicting_robots: bool = True

    @field_validator(
        "maximum_death_by_age",
        "maximum_death_by_weight",
        "probability_of_death_by_age",
        "probability_of_death_by_weight",
        "protect_best_robots",
    )
    @classmethod
    def validate_fraction(cls, v: float) -> float:
        return _unit_interval(v)

    @field_validator("protect_robots_until_outcomes")
    @classmethod
    def validate_counts(cls, v: int) -> int:
        return _non_negative(v)


class ProcessorConfig(BaseModel):
    variable_count: int = 256
    instruction_limit: int = 256

    @field_validator("variable_count")
    @classmethod
    def validate_variables(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("variable_count must be positive")
        return v

    @field_validator("instruction_limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        return _non_negative(v)


class EvaluationConfig(BaseModel):
    ticks_per_generation: int = 10
    input_window: int = 4

    @field_validator("ticks_per_generation", "input_window")
    @classmethod
    def validate_counts(cls, v: int) -> int:
        return _non_negative(v)


class OutputConfig(BaseModel):
    run_dir: Path = Path("runs")
    summarize: bool = True


class ConfigSchema(BaseModel):
    seed: int = 0
    population: PopulationConfig = Field(default_factory=PopulationConfig)
    breeder: BreederConfig = Field(default_factory=BreederConfig)
    mutator: MutatorConfig = Field(default_factory=MutatorConfig)
    killer: KillerConfig = Field(default_factory=KillerConfig)
    processor: ProcessorConfig = Field(default_factory=ProcessorConfig)
    evaluation: EvaluationConfig = Field(default_factory=EvaluationConfig)
    outputs: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: Path) -> ConfigSchema:
    data = yaml.safe_load(Path(path).read_text()) or {}
    return ConfigSchema(**data)


def load_default_config() -> ConfigSchema:
    """Load the ``defaults.yaml`` shipped inside the package."""
    text = resources.files("genobreed.config").joinpath("defaults.yaml").read_text()
    return ConfigSchema(**(yaml.safe_load(text) or {}))


def breeder_settings_from_config(breeder_cfg: BreederConfig) -> BreederSettings:
    """Build frozen ``BreederSettings`` from a breeder config section."""

    return BreederSettings(
        random_robots=breeder_cfg.random_robots,
        data_maximum_offset=breeder_cfg.data_maximum_offset,
        ignore_columns=frozenset(breeder_cfg.ignore_columns),
        minimum_outcomes_to_allow_breeding=breeder_cfg.minimum_outcomes_to_allow_breeding,
        outcomes_between_breeding=breeder_cfg.outcomes_between_breeding,
        inherited_weight_percent=breeder_cfg.inherited_weight_percent,
    )


def mutator_settings_from_config(mutator_cfg: MutatorConfig) -> MutatorSettings:
    return MutatorSettings(
        instruction_mutation_probability=mutator_cfg.instruction_mutation_probability,
        new_instruction_probability=mutator_cfg.new_instruction_probability,
        skip_instruction_probability=mutator_cfg.skip_instruction_probability,
    )


def killer_settings_from_config(killer_cfg: KillerConfig) -> KillerSettings:
    return KillerSettings(**killer_cfg.model_dump())
