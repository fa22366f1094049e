"""Generation runner: seed a population, then evaluate, kill and breed it repeatedly."""
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import numpy as np
import yaml
from rich.console import Console
from rich.table import Table

from genobreed.breeder import SimpleBreeder
from genobreed.config import (
    ConfigSchema,
    breeder_settings_from_config,
    killer_settings_from_config,
    mutator_settings_from_config,
)
from genobreed.core.profiling import timer
from genobreed.core.rng import generation_seed, make_rng
from genobreed.engine.checkpointing import load_population, save_population
from genobreed.engine.evaluation import Evaluator
from genobreed.engine.metrics import append_metrics, population_stats
from genobreed.killer import SimpleKiller
from genobreed.mutator import RandomMutator
from genobreed.population import Population
from genobreed.processor import Processor

console = Console()

CHECKPOINT_NAME = "population.db"
METRICS_NAME = "metrics.csv"


def build_breeder(config: ConfigSchema, rng: np.random.Generator) -> SimpleBreeder:
    mutator = RandomMutator(mutator_settings_from_config(config.mutator), rng)
    return SimpleBreeder(breeder_settings_from_config(config.breeder), mutator)


def build_killer(config: ConfigSchema, rng: np.random.Generator) -> SimpleKiller:
    return SimpleKiller(killer_settings_from_config(config.killer), rng)


def build_evaluator(config: ConfigSchema, rng: np.random.Generator) -> Evaluator:
    processor = Processor(config.processor.variable_count, config.processor.instruction_limit)
    return Evaluator(
        processor,
        rng,
        ticks=config.evaluation.ticks_per_generation,
        input_window=config.evaluation.input_window,
    )


def run_generation(
    population: Population, breeder: SimpleBreeder, killer: SimpleKiller, evaluator: Evaluator
) -> Dict[str, Any]:
    evaluation = evaluator.evaluate(population)
    killed = killer.kill_robots(population, population.robot_infos())
    report = breeder.breed_population(population, population.robot_infos())
    return {**evaluation, "killed": killed, **report.as_dict(), **population_stats(population)}


def run_dir_for(config: ConfigSchema) -> Path:
    return Path(config.outputs.run_dir) / f"genobreed_{config.seed}"


def initialize_population(config: ConfigSchema) -> Path:
    run_dir = run_dir_for(config)
    run_dir.mkdir(parents=True, exist_ok=True)
    breeder = build_breeder(config, make_rng(config.seed))
    population = Population(config.population.desired_size)
    with timer("initial population"):
        report = breeder.breed_population(population, population.robot_infos())
    save_population(run_dir / CHECKPOINT_NAME, population, generation=0, seed=config.seed)
    append_metrics({"generation": 0, "predicting_robots": 0, "killed": 0, **report.as_dict(), **population_stats(population)}, run_dir / METRICS_NAME)
    config_dict = config.model_dump(mode="json")
    with open(run_dir / "config.yaml", "w") as f:
        yaml.safe_dump(config_dict, f)
    console.print(f"Population of {population.size} robots -> {run_dir}")
    return run_dir


def evolve(config: ConfigSchema, run_dir: Path, generations: int) -> Path:
    checkpoint = run_dir / CHECKPOINT_NAME
    population, generation, seed = load_population(checkpoint)
    records = []
    for _ in range(generations):
        generation += 1
        rng = make_rng(generation_seed(seed, generation))
        evaluator = build_evaluator(config, rng)
        killer = build_killer(config, rng)
        breeder = build_breeder(config, rng)
        with timer(f"generation {generation}"):
            record = {"generation": generation, **run_generation(population, breeder, killer, evaluator)}
        append_metrics(record, run_dir / METRICS_NAME)
        records.append(record)
        console.log(
            f"generation {generation} | predicting={record['predicting_robots']} | killed={record['killed']} | bred={record['bred_robots']} | "
            f"random={record['random_robots'] + record['top_off_robots']} | mean_length={record['mean_length']:.1f}"
        )
    save_population(checkpoint, population, generation=generation, seed=seed)
    if config.outputs.summarize and records:
        table = Table(title="Breeding summary", show_lines=True)
        table.add_column("metric")
        table.add_column("value")
        for key in ("predicting_robots", "killed", "bred_robots", "random_robots", "top_off_robots", "size", "mean_length", "max_length"):
            table.add_row(key, f"{records[-1][key]}")
        console.print(table)
    console.print(f"Breeding complete at generation {generation} -> {run_dir}")
    return run_dir


def population_table(run_dir: Path, top: int = 20) -> Table:
    population, generation, _ = load_population(run_dir / CHECKPOINT_NAME)
    table = Table(title=f"Generation {generation}: {population.size}/{population.desired_size} robots")
    for column in ("name", "length", "weight", "inherited", "children", "outcomes"):
        table.add_column(column)
    robots = sorted(population.robots(), key=lambda robot: abs(robot.weight), reverse=True)
    for robot in robots[:top]:
        table.add_row(
            str(robot.name),
            str(robot.main_function.size),
            f"{robot.weight:.4f}",
            f"{robot.inherited_weight:.4f}",
            str(robot.children),
            str(robot.total_outcomes),
        )
    return table
