"""Value population exports."""

from .value_population import populate

__all__ = ["populate"]
