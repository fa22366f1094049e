"""Metrics aggregation and output."""
from __future__ import annotations
from pathlib import Path
import pandas as pd

from genobreed.population import Population


def save_metrics(records: list[dict], path: Path):
    df = pd.DataFrame(records)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return df


def append_metrics(record: dict, path: Path):
    if path.exists():
        df = pd.concat([pd.read_csv(path), pd.DataFrame([record])], ignore_index=True)
    else:
        df = pd.DataFrame([record])
    return save_metrics(df.to_dict("records"), path)


def population_stats(population: Population) -> dict:
    robots = population.robots()
    lengths = pd.Series([robot.main_function.size for robot in robots], dtype="float64")
    weights = pd.Series([robot.weight for robot in robots], dtype="float64")
    return {
        "size": population.size,
        "desired_size": population.desired_size,
        "mean_length": float(lengths.mean()) if len(lengths) else 0.0,
        "max_length": int(lengths.max()) if len(lengths) else 0,
        "mean_weight": float(weights.mean()) if len(weights) else 0.0,
    }
