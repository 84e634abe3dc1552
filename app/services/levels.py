"""
Maturity levels and their numeric scale.

Scores run 0 (Associate) to 4 (Lead). Level names are admin-editable, so a
name is resolved by case-insensitive substring ("Senior Level", "senior" and
"Senior Engineer" all resolve to SENIOR).
"""
import enum
import logging
import math
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class MaturityLevel(str, enum.Enum):
    ASSOCIATE = "Associate"
    LEVEL_1 = "Level 1"
    LEVEL_2 = "Level 2"
    SENIOR = "Senior Level"
    LEAD = "Lead"

    @property
    def score(self) -> int:
        return _SCORES[self]

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["MaturityLevel"]:
        if not name:
            return None
        normalized = name.lower()
        # Order matters: the first matching needle wins
        for needle, level in _NEEDLES:
            if needle in normalized:
                return level
        return None


_SCORES: Dict[MaturityLevel, int] = {
    MaturityLevel.ASSOCIATE: 0,
    MaturityLevel.LEVEL_1: 1,
    MaturityLevel.LEVEL_2: 2,
    MaturityLevel.SENIOR: 3,
    MaturityLevel.LEAD: 4,
}

_NEEDLES: Tuple[Tuple[str, MaturityLevel], ...] = (
    ("associate", MaturityLevel.ASSOCIATE),
    ("level 1", MaturityLevel.LEVEL_1),
    ("level 2", MaturityLevel.LEVEL_2),
    ("senior", MaturityLevel.SENIOR),
    ("lead", MaturityLevel.LEAD),
)

# Expected average score range for someone declared at each level
LEVEL_RANGES: Dict[MaturityLevel, Tuple[float, float]] = {
    MaturityLevel.ASSOCIATE: (0.0, 0.7),
    MaturityLevel.LEVEL_1: (0.8, 1.7),
    MaturityLevel.LEVEL_2: (1.8, 2.7),
    MaturityLevel.SENIOR: (2.8, 3.7),
    MaturityLevel.LEAD: (3.8, 4.0),
}

# Lower bound of each band, highest first
_BAND_CUTS: Tuple[Tuple[float, MaturityLevel], ...] = (
    (3.8, MaturityLevel.LEAD),
    (2.8, MaturityLevel.SENIOR),
    (1.8, MaturityLevel.LEVEL_2),
    (0.8, MaturityLevel.LEVEL_1),
)


def level_score(level_name: Optional[str]) -> int:
    """Numeric score for a level name. Missing names are "not rated" and score 0."""
    if not level_name:
        return 0
    level = MaturityLevel.from_name(level_name)
    if level is None:
        logger.warning(f"Unrecognized level name '{level_name}', scoring as 0")
        return 0
    return level.score


def level_band(avg_score: float) -> MaturityLevel:
    rounded = round_score(avg_score)
    for cut, level in _BAND_CUTS:
        if rounded >= cut:
            return level
    return MaturityLevel.ASSOCIATE


def round_score(value: float) -> float:
    """One-decimal rounding, halves away from zero for the non-negative score range."""
    return math.floor(value * 10 + 0.5) / 10
