"""Selection metadata kept apart from a robot's program."""
from __future__ import annotations

from dataclasses import dataclass

from .robot import Robot


@dataclass(frozen=True)
class RobotInfo:
    name: str
    weight: float
    total_outcomes: int = 0
    outcomes_at_last_child: int = 0
    children: int = 0

    @classmethod
    def from_robot(cls, robot: Robot) -> "RobotInfo":
        if robot.name is None:
            raise ValueError("robot must be saved before it can be described")
        return cls(
            name=robot.name,
            weight=robot.weight,
            total_outcomes=robot.total_outcomes,
            outcomes_at_last_child=robot.outcomes_at_last_child,
            children=robot.children,
        )

    def can_be_parent(self, minimum_outcomes: int, outcomes_between_children: int) -> bool:
        if self.total_outcomes < minimum_outcomes:
            return False
        return self.total_outcomes - self.outcomes_at_last_child >= outcomes_between_children
