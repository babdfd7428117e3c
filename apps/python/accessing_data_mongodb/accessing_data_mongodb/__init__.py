"""Demo application that seeds and queries the customer collection."""

from .runner import CustomerDemoRunner, RunnerState, run

__all__ = ["CustomerDemoRunner", "RunnerState", "run"]
