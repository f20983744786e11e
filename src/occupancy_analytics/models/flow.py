"""
Flow Statistics Models
======================

Descriptive statistics over a set of flow samples.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Percentiles:
    """Nearest-rank percentiles, rounded to integers."""
    
    p25: int
    p75: int
    p90: int
    p95: int
    
    def to_dict(self) -> dict:
        return {"p25": self.p25, "p75": self.p75, "p90": self.p90, "p95": self.p95}


@dataclass(frozen=True, slots=True)
class FlowStats:
    """
    Summary of a flow sample set.
    
    All scalar values are rounded to 2 decimals.
    
    Attributes:
        mean: Arithmetic mean
        median: Middle element of the sorted samples (upper-middle for even n)
        min: Smallest sample
        max: Largest sample
        range: max - min
        variance: Population variance
        standard_deviation: Square root of the population variance
        percentiles: p25/p75/p90/p95
    """
    
    mean: float
    median: float
    min: float
    max: float
    range: float
    variance: float
    standard_deviation: float
    percentiles: Percentiles
    
    @property
    def coefficient_of_variation(self) -> float:
        """standard_deviation / mean, or 0.0 when the mean is not positive."""
        if self.mean <= 0:
            return 0.0
        return self.standard_deviation / self.mean
    
    def __repr__(self) -> str:
        return (
            f"FlowStats(mean={self.mean:.2f}, median={self.median:.2f}, "
            f"std={self.standard_deviation:.2f}, range=[{self.min}, {self.max}])"
        )
    
    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "mean": self.mean,
            "median": self.median,
            "min": self.min,
            "max": self.max,
            "range": self.range,
            "variance": self.variance,
            "standard_deviation": self.standard_deviation,
            "percentiles": self.percentiles.to_dict(),
        }
