"""In-memory, capacity-bounded robot store."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .robot import Robot
from .robot_info import RobotInfo


class Population:
    """Live robots of one generation, keyed by name in insertion order."""

    def __init__(self, desired_size: int, *, next_id: int = 1):
        if desired_size < 0:
            raise ValueError("desired_size must be non-negative")
        self.desired_size = desired_size
        self._robots: Dict[str, Robot] = {}
        self._next_id = next_id

    @property
    def size(self) -> int:
        return len(self._robots)

    def __len__(self) -> int:
        return len(self._robots)

    def __contains__(self, name: object) -> bool:
        return name in self._robots

    def have_space_to_breed(self) -> bool:
        return self.size < self.desired_size

    def _new_name(self) -> str:
        name = f"r{self._next_id:06d}"
        self._next_id += 1
        return name

    def save_robot(self, robot: Robot) -> str:
        if robot.name is None:
            robot.name = self._new_name()
        self._robots[robot.name] = robot
        return robot.name

    def get_robot(self, name: str) -> Optional[Robot]:
        return self._robots.get(name)

    def remove_robot(self, name: str) -> Optional[Robot]:
        return self._robots.pop(name, None)

    def robots(self) -> List[Robot]:
        return list(self._robots.values())

    def robot_infos(self) -> List[RobotInfo]:
        return [RobotInfo.from_robot(robot) for robot in self._robots.values()]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "desired_size": self.desired_size,
            "next_id": self._next_id,
            "robots": [robot.to_dict() for robot in self._robots.values()],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Population":
        population = cls(int(data["desired_size"]), next_id=int(data.get("next_id", 1)))
        for item in data.get("robots", []):
            population.save_robot(Robot.from_dict(item))
        return population
