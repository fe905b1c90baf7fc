"""Unity IL2CPP build orchestrator."""

__version__ = "0.3.0"
