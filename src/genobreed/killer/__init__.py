"""Population culling."""
from .killer import KillerSettings, SimpleKiller

__all__ = ["KillerSettings", "SimpleKiller"]
