"""Program execution."""
from .processor import Processor

__all__ = ["Processor"]
