"""Console output for issue-summoner commands."""
