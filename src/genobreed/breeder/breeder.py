"""Generation refresh: random seeding, fitness-proportionate breeding, top-off."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence

from genobreed.instructions import Instruction, InstructionList, TerminateInstructionList
from genobreed.mutator import Mutator
from genobreed.population import Population, Robot, RobotInfo

logger = logging.getLogger(__name__)

RANDOM_PROGRAM_MAX_LENGTH = 1024


@dataclass(frozen=True)
class BreederSettings:
    random_robots: float = 0.0
    data_maximum_offset: int = 0
    ignore_columns: FrozenSet[int] = field(default_factory=frozenset)
    minimum_outcomes_to_allow_breeding: int = 0
    outcomes_between_breeding: int = 0
    inherited_weight_percent: float = 0.0


@dataclass
class BreedingReport:
    random_robots: int = 0
    bred_robots: int = 0
    top_off_robots: int = 0
    eligible_parents: int = 0

    def as_dict(self) -> dict:
        return {
            "random_robots": self.random_robots,
            "bred_robots": self.bred_robots,
            "top_off_robots": self.top_off_robots,
            "eligible_parents": self.eligible_parents,
        }


class SimpleBreeder:
    """Refill a population toward its desired size.

    A breeding pass owns ``mutator`` for its whole duration; the draw order is
    part of the observable behavior.
    """

    def __init__(self, settings: BreederSettings, mutator: Mutator):
        self.settings = settings
        self.mutator = mutator

    def breed_population(self, population: Population, robot_infos: Sequence[RobotInfo]) -> BreedingReport:
        report = BreedingReport()
        if not population.have_space_to_breed():
            return report
        report.random_robots = self._add_required_random_robots(population)
        report.eligible_parents, report.bred_robots = self._breed_population_from_parents(population, robot_infos)
        report.top_off_robots = self._add_optional_random_robots(population)
        logger.debug(
            "bred population: random=%d bred=%d top_off=%d eligible=%d size=%d/%d",
            report.random_robots,
            report.bred_robots,
            report.top_off_robots,
            report.eligible_parents,
            population.size,
            population.desired_size,
        )
        return report

    def _add_required_random_robots(self, population: Population) -> int:
        if self.settings.random_robots <= 0:
            return 0
        count = int(round(self.settings.random_robots * population.desired_size))
        self._fill_with_robots(count, population)
        return count

    def _add_optional_random_robots(self, population: Population) -> int:
        count = population.desired_size - population.size
        if count <= 0:
            return 0
        self._fill_with_robots(count, population)
        return count

    def _fill_with_robots(self, count: int, population: Population):
        for _ in range(count):
            self.create_random_robot(population)

    def create_random_robot(self, population: Population) -> Robot:
        robot = Robot.create_empty(self.settings.data_maximum_offset, self.settings.ignore_columns)
        instructions_count = abs(self.mutator.next_int()) % RANDOM_PROGRAM_MAX_LENGTH
        main = robot.main_function
        for _ in range(instructions_count):
            instruction = self.mutator.random_instruction()
            instruction.mutate(self.mutator)
            main.add_instruction(instruction)
        population.save_robot(robot)
        return robot

    def _breed_population_from_parents(self, population: Population, robot_infos: Sequence[RobotInfo]) -> tuple[int, int]:
        settings = self.settings
        pool = [
            info
            for info in robot_infos
            if info.can_be_parent(settings.minimum_outcomes_to_allow_breeding, settings.outcomes_between_breeding)
        ]
        eligible = len(pool)
        bred = 0
        while population.have_space_to_breed():
            parent1 = self.get_possible_parent(population, pool)
            parent2 = self.get_possible_parent(population, pool)
            if parent1 is None or parent2 is None:
                break
            child = Robot.create_empty(settings.data_maximum_offset, settings.ignore_columns)
            self.make_child(parent1, parent2, child)
            population.save_robot(child)
            parent1.record_child()
            population.save_robot(parent1)
            parent2.record_child()
            population.save_robot(parent2)
            bred += 1
        return eligible, bred

    def get_possible_parent(self, population: Population, pool: List[RobotInfo]) -> Optional[Robot]:
        """Draw one parent proportionally to ``abs(weight)`` and remove it from ``pool``."""
        total_weight = sum(abs(info.weight) for info in pool)
        target = abs(total_weight * self.mutator.next_double())
        if total_weight == 0.0:
            return None
        weight_so_far = 0.0
        for index, info in enumerate(pool):
            weight_so_far += abs(info.weight)
            if weight_so_far >= target:
                del pool[index]
                return population.get_robot(info.name)
        return None

    def make_child(self, parent1: Robot, parent2: Robot, child: Robot):
        child.inherited_weight = self.parents_weight(parent1, parent2)
        child.main_function = self.blend_instruction_lists(parent1.main_function, parent2.main_function)

    def parents_weight(self, parent1: Robot, parent2: Robot) -> float:
        return self.settings.inherited_weight_percent * (parent1.weight + parent2.weight) / 2

    def blend_instruction_lists(self, list1: InstructionList, list2: InstructionList) -> InstructionList:
        # Breakpoints are bounded by each parent's own size, so children drift
        # shorter over generations; only new-instruction insertion offsets it.
        instruction_list = InstructionList()
        break1 = self._break_point(list1)
        break2 = self._break_point(list2)
        self.copy_block(instruction_list, list1, 0, break1)
        self.copy_block(instruction_list, list2, break2, list2.size - 1)
        return instruction_list

    def _break_point(self, instruction_list: InstructionList) -> int:
        size = instruction_list.size
        if size == 0:
            return 0
        return abs(self.mutator.next_int()) % size

    def copy_block(self, destination: InstructionList, source: InstructionList, start: int, stop: int):
        """Copy ``source[start..stop]`` (inclusive) through the insertion gates.

        Copying stops at the first terminator.
        """
        if source.size == 0:
            return
        if start > stop:
            raise AssertionError(f"start > stop {start} {stop}")
        for index in range(start, stop + 1):
            instruction = source.get_instruction(index).copy()
            if isinstance(instruction, TerminateInstructionList):
                break
            self._add_instruction(instruction, destination)

    def _add_instruction(self, instruction: Instruction, destination: InstructionList):
        if self.mutator.skip_next_instruction():
            return
        if self.mutator.allow_new_instruction():
            destination.add_instruction(self.mutator.random_instruction())
        if self.mutator.allow_instruction_mutation():
            instruction.mutate(self.mutator)
        destination.add_instruction(instruction)
