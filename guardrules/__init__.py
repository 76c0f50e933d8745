"""Error types for a policy-as-code rules engine."""

__version__ = "0.1.0"
__all__ = ["errors"]