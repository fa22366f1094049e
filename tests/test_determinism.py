import pytest

pytest.importorskip("pydantic")
pytest.importorskip("pandas")
pytest.importorskip("numpy")

from genobreed.config import ConfigSchema
from genobreed.engine.checkpointing import load_population
from genobreed.engine.sim_runner import CHECKPOINT_NAME, METRICS_NAME, evolve, initialize_population
import pandas as pd


def _config(run_root, size=30):
    cfg = ConfigSchema()
    cfg.outputs.run_dir = run_root
    cfg.outputs.summarize = False
    cfg.population.desired_size = size
    cfg.killer.protect_robots_until_outcomes = 0
    cfg.killer.protect_best_robots = 0.0
    return cfg


def _breeding_config(run_root):
    # every register holds an input, so most returning programs make predictions
    cfg = _config(run_root, size=40)
    cfg.processor.variable_count = 4
    cfg.evaluation.ticks_per_generation = 25
    cfg.evaluation.input_window = 4
    cfg.breeder.minimum_outcomes_to_allow_breeding = 20
    cfg.breeder.outcomes_between_breeding = 20
    return cfg


def test_initial_population_is_full(tmp_path):
    run_dir = initialize_population(_config(tmp_path))
    population, generation, _ = load_population(run_dir / CHECKPOINT_NAME)
    assert generation == 0
    assert population.size == 30
    assert all(0 <= robot.main_function.size <= 1023 for robot in population.robots())
    assert all(robot.total_outcomes == 0 for robot in population.robots())


def test_deterministic_run(tmp_path):
    first = evolve(_config(tmp_path / "a"), initialize_population(_config(tmp_path / "a")), 2)
    second = evolve(_config(tmp_path / "b"), initialize_population(_config(tmp_path / "b")), 2)
    df1 = pd.read_csv(first / METRICS_NAME)
    df2 = pd.read_csv(second / METRICS_NAME)
    assert df1.equals(df2)
    assert list(df1["generation"]) == [0, 1, 2]
    assert (df1["size"] == 30).all()
    pop1, generation, _ = load_population(first / CHECKPOINT_NAME)
    pop2, _, _ = load_population(second / CHECKPOINT_NAME)
    assert generation == 2
    assert [r.main_function for r in pop1.robots()] == [r.main_function for r in pop2.robots()]
    assert [r.weight for r in pop1.robots()] == [r.weight for r in pop2.robots()]


def test_evolve_breeds_from_scored_parents(tmp_path):
    cfg = _breeding_config(tmp_path)
    run_dir = evolve(cfg, initialize_population(cfg), 3)
    df = pd.read_csv(run_dir / METRICS_NAME)
    generations = df.iloc[1:]
    assert (generations["predicting_robots"] > 0).all()
    assert generations["eligible_parents"].sum() > 0
    assert df["bred_robots"].sum() > 0
    assert (df["size"] == 40).all()
    population, _, _ = load_population(run_dir / CHECKPOINT_NAME)
    assert any(robot.total_outcomes >= 25 for robot in population.robots())


def test_evaluator_follows_processor_and_evaluation_config(tmp_path):
    from genobreed.core.rng import make_rng
    from genobreed.engine.sim_runner import build_evaluator

    cfg = _breeding_config(tmp_path)
    cfg.processor.instruction_limit = 7
    evaluator = build_evaluator(cfg, make_rng(0))
    assert evaluator.processor.variable_count == 4
    assert evaluator.processor.instruction_limit == 7
    assert (evaluator.ticks, evaluator.input_window) == (25, 4)
    assert len(evaluator.draw_series()) == 29
