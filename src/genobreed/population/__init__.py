"""Robots and the population that holds them."""
from .robot import Robot
from .robot_info import RobotInfo
from .population import Population

__all__ = ["Robot", "RobotInfo", "Population"]
