"""githd — browse git history and the files each commit touched."""

__version__ = "0.3.0"
