"""Culling policy that frees population slots before breeding."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Set

import numpy as np

from genobreed.population import Population, RobotInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KillerSettings:
    maximum_death_by_age: float = 0.0
    maximum_death_by_weight: float = 0.0
    probability_of_death_by_age: float = 0.0
    probability_of_death_by_weight: float = 0.0
    protect_robots_until_outcomes: int = 0
    protect_best_robots: float = 0.0
    kill_non_predicting_robots: bool = False


class SimpleKiller:
    def __init__(self, settings: KillerSettings, rng: np.random.Generator):
        self.settings = settings
        self.rng = rng

    def kill_robots(self, population: Population, robot_infos: Sequence[RobotInfo]) -> int:
        """Remove robots from ``population`` and return how many died."""
        settings = self.settings
        protected = self._protected_names(population, robot_infos)
        candidates: List[RobotInfo] = [info for info in robot_infos if info.name not in protected]
        killed = 0
        if settings.kill_non_predicting_robots:
            survivors = []
            for info in candidates:
                if info.weight == 0.0:
                    population.remove_robot(info.name)
                    killed += 1
                else:
                    survivors.append(info)
            candidates = survivors
        by_weight = sorted(candidates, key=lambda info: abs(info.weight))
        limit = int(round(settings.maximum_death_by_weight * population.desired_size))
        dead = self._kill_with_probability(population, by_weight[:limit], settings.probability_of_death_by_weight)
        killed += len(dead)
        candidates = [info for info in candidates if info.name not in dead]
        by_age = sorted(candidates, key=lambda info: info.total_outcomes, reverse=True)
        limit = int(round(settings.maximum_death_by_age * population.desired_size))
        dead = self._kill_with_probability(population, by_age[:limit], settings.probability_of_death_by_age)
        killed += len(dead)
        logger.debug("killed %d robots, %d protected, %d left", killed, len(protected), population.size)
        return killed

    def _protected_names(self, population: Population, robot_infos: Sequence[RobotInfo]) -> Set[str]:
        protected = {info.name for info in robot_infos if info.total_outcomes < self.settings.protect_robots_until_outcomes}
        best_count = int(round(self.settings.protect_best_robots * population.desired_size))
        if best_count > 0:
            best = sorted(robot_infos, key=lambda info: abs(info.weight), reverse=True)[:best_count]
            protected.update(info.name for info in best)
        return protected

    def _kill_with_probability(self, population: Population, infos: Sequence[RobotInfo], probability: float) -> Set[str]:
        dead: Set[str] = set()
        for info in infos:
            if self.rng.random() < probability:
                population.remove_robot(info.name)
                dead.add(info.name)
        return dead
