"""
Insight Models
==============

Short narrative findings derived from the analytics outputs.

Each insight carries a fixed machine-readable type and icon tag so the
presentation layer can style it without parsing the message text.
"""

from dataclasses import dataclass
from enum import Enum


class InsightType(str, Enum):
    """
    Category of an insight.
    
    Attributes:
        TREND: Forecast direction and confidence
        PATTERN: Recurring peak hour
        ALERT: Areas at critical density
        VARIABILITY: Unstable flow
    """
    
    TREND = "trend"
    PATTERN = "pattern"
    ALERT = "alert"
    VARIABILITY = "variability"


class Priority(str, Enum):
    """Display priority of an insight."""
    
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True, slots=True)
class Insight:
    """
    A single rule-generated finding.
    
    Attributes:
        type: Insight category
        title: Short heading
        message: One-sentence finding
        priority: Display priority
        icon: Icon tag for the presentation layer
    """
    
    type: InsightType
    title: str
    message: str
    priority: Priority
    icon: str
    
    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "type": self.type.value,
            "title": self.title,
            "message": self.message,
            "priority": self.priority.value,
            "icon": self.icon,
        }
