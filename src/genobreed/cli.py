"""Typer CLI for genobreed."""
from __future__ import annotations
import logging
import typer
from pathlib import Path
from rich import print
from rich.logging import RichHandler

from genobreed.config import ConfigSchema, load_config, load_default_config
from genobreed.engine.sim_runner import evolve, initialize_population, population_table

app = typer.Typer(help="genobreed population breeding CLI")


def _load(config: Path | None) -> ConfigSchema:
    return load_config(config) if config is not None else load_default_config()


def _setup_logging(verbose: bool):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler()])


@app.command()
def init(
    config: Path = typer.Option(None, help="YAML config path (packaged defaults if omitted)"),
    seed: int = typer.Option(None, help="Override seed"),
    size: int = typer.Option(None, help="Override desired population size"),
    run_dir: Path = typer.Option(None, help="Override output root"),
    verbose: bool = typer.Option(False, help="Debug logging"),
):
    """Create a population of random robots."""
    _setup_logging(verbose)
    cfg = _load(config)
    if seed is not None:
        cfg.seed = seed
    if size is not None:
        if size <= 0:
            raise typer.BadParameter("size must be positive")
        cfg.population.desired_size = size
    if run_dir is not None:
        cfg.outputs.run_dir = run_dir
    initialize_population(cfg)


@app.command()
def breed(
    run: Path = typer.Argument(..., help="Run directory created by init"),
    config: Path = typer.Option(None, help="YAML config path (packaged defaults if omitted)"),
    generations: int = typer.Option(1, help="Generations to breed"),
    verbose: bool = typer.Option(False, help="Debug logging"),
):
    """Kill and breed a saved population."""
    _setup_logging(verbose)
    if generations < 0:
        raise typer.BadParameter("generations must be non-negative")
    cfg = _load(config)
    evolve(cfg, run, generations)


@app.command()
def show(
    run: Path = typer.Argument(..., help="Run directory"),
    top: int = typer.Option(20, help="Robots to list"),
):
    print(population_table(run, top=top))


@app.command()
def doctor():
    import importlib.util

    status = {mod: importlib.util.find_spec(mod) is not None for mod in ("numpy", "pandas", "pydantic", "yaml")}
    print(status)


if __name__ == "__main__":
    app()
