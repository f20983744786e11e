"""
Data Quality Models
===================
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class QualityTier(str, Enum):
    """
    Quality tier derived from the score.
    
    Thresholds:
        EXCELLENT: >= 80
        GOOD:      >= 60
        REGULAR:   >= 40
        CRITICAL:  < 40
    """
    
    EXCELLENT = "Excellent"
    GOOD = "Good"
    REGULAR = "Regular"
    CRITICAL = "Critical"
    
    @classmethod
    def from_score(cls, score: int) -> "QualityTier":
        if score >= 80:
            return cls.EXCELLENT
        if score >= 60:
            return cls.GOOD
        if score >= 40:
            return cls.REGULAR
        return cls.CRITICAL


@dataclass(frozen=True, slots=True)
class QualityReport:
    """
    Completeness, freshness and consistency score of an input snapshot.
    
    Attributes:
        score: Score in [0, 100]
        quality: Tier derived from the score
        issues: Description of every deduction, in evaluation order
    """
    
    score: int
    quality: QualityTier
    issues: Tuple[str, ...]
    
    def __post_init__(self) -> None:
        """Validate invariants."""
        if not 0 <= self.score <= 100:
            raise ValueError("score must be in [0, 100]")
    
    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "score": self.score,
            "quality": self.quality.value,
            "issues": list(self.issues),
        }
