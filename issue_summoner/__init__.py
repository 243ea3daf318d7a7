"""issue-summoner - turn actionable source comments into issue records."""

__version__ = "0.1.0"
