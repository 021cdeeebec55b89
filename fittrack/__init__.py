"""fittrack - single-user fitness tracking core.

Domain store for workouts, meals, measurements and habits plus the pure
aggregation functions that feed dashboards and progress charts.
"""

__version__ = "0.1.0"
