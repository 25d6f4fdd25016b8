"""Data-structure teaching tools: queueing simulation, search trees and graphs."""

__version__ = "0.2.0"
__all__ = ["graphs", "queueing", "search"]