import math
import random
from typing import List, Optional
from core.types import PatientData, PredictionResult, RiskLevel

# (attribute, predicate, points, factor text); all checks run, in this order.
CHECKS = [
    ("age", lambda v: v > 60, 20, "Advanced age (>60 years)"),
    ("age", lambda v: 45 < v <= 60, 10, None),
    ("total_bilirubin", lambda v: v > 2.0, 25, "Elevated total bilirubin"),
    ("direct_bilirubin", lambda v: v > 0.5, 15, "Elevated direct bilirubin"),
    ("alanine_aminotransferase", lambda v: v > 50, 20, "Elevated ALT levels"),
    ("aspartate_aminotransferase", lambda v: v > 50, 20, "Elevated AST levels"),
    ("albumin", lambda v: v < 3.5, 25, "Low albumin levels"),
    ("albumin_globulin_ratio", lambda v: v < 1.0, 15, "Low A/G ratio"),
]

# Highest threshold first; first match wins.
BUCKETS = [
    (70, RiskLevel.CRITICAL),
    (40, RiskLevel.HIGH),
    (20, RiskLevel.MODERATE),
]

RECOMMENDATIONS = {
    RiskLevel.CRITICAL: (
        "Immediate specialist consultation required",
        "Comprehensive liver function assessment",
        "Consider hospitalization for monitoring",
        "Evaluate for liver transplant candidacy",
    ),
    RiskLevel.HIGH: (
        "Urgent hepatologist referral recommended",
        "Advanced imaging studies (CT/MRI)",
        "Regular monitoring every 3 months",
        "Lifestyle modifications essential",
    ),
    RiskLevel.MODERATE: (
        "Schedule follow-up in 6 months",
        "Consider ultrasound examination",
        "Monitor liver function tests",
        "Dietary and lifestyle counseling",
    ),
    RiskLevel.LOW: (
        "Continue routine health monitoring",
        "Annual liver function screening",
        "Maintain healthy lifestyle",
        "Regular exercise and balanced diet",
    ),
}

CONF_MIN = 75.0
CONF_SPAN = 20.0
CONF_MAX = 95.0


def risk_points(data: PatientData) -> tuple[int, List[str]]:
    """Sum the points of every check that fires; NaN inputs never fire."""
    total = 0
    factors: List[str] = []
    for attr, fires, points, factor in CHECKS:
        if fires(getattr(data, attr)):
            total += points
            if factor:
                factors.append(factor)
    return total, factors


def bucket(total: float) -> RiskLevel:
    for threshold, level in BUCKETS:
        if total >= threshold:
            return level
    return RiskLevel.LOW


def confidence(rng: Optional[random.Random] = None) -> float:
    # Decorative only; not derived from the inputs.
    u = (rng or random).random()
    c = CONF_MIN + u * CONF_SPAN
    # rounding can land on the upper bound; keep it open
    return c if c < CONF_MAX else math.nextafter(CONF_MAX, CONF_MIN)


def score(data: PatientData, rng: Optional[random.Random] = None) -> PredictionResult:
    total, factors = risk_points(data)
    level = bucket(total)
    return PredictionResult(
        risk=level,
        confidence=confidence(rng),
        risk_factors=tuple(factors),
        recommendations=RECOMMENDATIONS[level],
        score=total,
    )
