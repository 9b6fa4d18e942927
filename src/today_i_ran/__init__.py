"""Today I Ran: average velocity, projections and comparisons for a run."""

__version__ = "0.1.0"
