"""Values validation: five-dimension thresholds and weighted empowerment score."""

from .validator import DIMENSION_WEIGHTS, validate

__all__ = ["DIMENSION_WEIGHTS", "validate"]
