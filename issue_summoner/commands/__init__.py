"""Click commands registered on the summon CLI group."""
