"""Campus portal backend: dashboards, grievances, academics, opportunities, map and forum."""

__version__ = "1.0.0"
