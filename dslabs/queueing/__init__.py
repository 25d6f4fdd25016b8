"""Array and linked queues, a two-queue service simulation and its menu."""

__all__ = ["cli", "queues", "simulation"]