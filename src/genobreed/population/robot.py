"""Robots: an evolved program plus fitness and lineage bookkeeping."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional

from genobreed.instructions import InstructionList


@dataclass
class Robot:
    main_function: InstructionList = field(default_factory=InstructionList)
    data_maximum_offset: int = 0
    ignore_columns: FrozenSet[int] = frozenset()
    name: Optional[str] = None
    inherited_weight: float = 0.0
    weight: float = 0.0
    children: int = 0
    total_outcomes: int = 0
    outcomes_at_last_child: int = 0
    correct_predictions: int = 0
    incorrect_predictions: int = 0

    @classmethod
    def create_empty(cls, data_maximum_offset: int, ignore_columns: Iterable[int]) -> "Robot":
        return cls(data_maximum_offset=data_maximum_offset, ignore_columns=frozenset(ignore_columns))

    def record_child(self):
        self.children += 1
        self.outcomes_at_last_child = self.total_outcomes

    def record_outcome(self, correct: Optional[bool]):
        """Count one outcome; ``None`` means the robot made no prediction."""
        self.total_outcomes += 1
        if correct is True:
            self.correct_predictions += 1
        elif correct is False:
            self.incorrect_predictions += 1
        self.weight = (self.correct_predictions - self.incorrect_predictions) / self.total_outcomes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "main_function": self.main_function.to_list(),
            "data_maximum_offset": self.data_maximum_offset,
            "ignore_columns": sorted(self.ignore_columns),
            "inherited_weight": self.inherited_weight,
            "weight": self.weight,
            "children": self.children,
            "total_outcomes": self.total_outcomes,
            "outcomes_at_last_child": self.outcomes_at_last_child,
            "correct_predictions": self.correct_predictions,
            "incorrect_predictions": self.incorrect_predictions,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Robot":
        return cls(
            main_function=InstructionList.from_list(data.get("main_function", [])),
            data_maximum_offset=int(data.get("data_maximum_offset", 0)),
            ignore_columns=frozenset(data.get("ignore_columns", [])),
            name=data.get("name"),
            inherited_weight=float(data.get("inherited_weight", 0.0)),
            weight=float(data.get("weight", 0.0)),
            children=int(data.get("children", 0)),
            total_outcomes=int(data.get("total_outcomes", 0)),
            outcomes_at_last_child=int(data.get("outcomes_at_last_child", 0)),
            correct_predictions=int(data.get("correct_predictions", 0)),
            incorrect_predictions=int(data.get("incorrect_predictions", 0)),
        )
