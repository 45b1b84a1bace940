"""GitHub stale issue triage."""

__version__ = "0.1.0"
