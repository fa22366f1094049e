"""Robot evaluation: run each program on a synthetic series and score its calls."""
from __future__ import annotations
from typing import Optional
import numpy as np

from genobreed.population import Population, Robot
from genobreed.processor import Processor


def prediction_outcome(result: Optional[float], actual: float) -> Optional[bool]:
    """``None`` when the robot abstained (no result or a flat call) or nothing moved."""
    if result is None or result == 0.0 or actual == 0.0:
        return None
    return (result > 0.0) == (actual > 0.0)


class Evaluator:
    def __init__(self, processor: Processor, rng: np.random.Generator, *, ticks: int = 10, input_window: int = 4):
        self.processor = processor
        self.rng = rng
        self.ticks = ticks
        self.input_window = input_window

    def draw_series(self) -> np.ndarray:
        return self.rng.normal(0.0, 1.0, size=self.ticks + self.input_window)

    def evaluate_robot(self, robot: Robot, changes: np.ndarray):
        """Each tick the last ``input_window`` changes predict the sign of the next one."""
        for tick in range(len(changes) - self.input_window):
            window = changes[tick : tick + self.input_window]
            actual = float(changes[tick + self.input_window])
            result = self.processor.run(robot.main_function, window)
            robot.record_outcome(prediction_outcome(result, actual))

    def evaluate(self, population: Population) -> dict:
        changes = self.draw_series()
        predicting = 0
        for robot in population.robots():
            self.evaluate_robot(robot, changes)
            population.save_robot(robot)
            if robot.correct_predictions + robot.incorrect_predictions > 0:
                predicting += 1
        return {"predicting_robots": predicting}
