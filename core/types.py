from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Protocol, List, Dict, Any, Optional, Tuple

from core.utils import parse_int, parse_float


class RiskLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    CRITICAL = "Critical"


# Integer fields parse like a number input with step=1; the rest are decimals.
INT_FIELDS = ("age", "alkaline_phosphatase", "alanine_aminotransferase", "aspartate_aminotransferase")
FLOAT_FIELDS = ("total_bilirubin", "direct_bilirubin", "total_proteins", "albumin", "albumin_globulin_ratio")


@dataclass(frozen=True)
class PatientData:
    age: float = 45
    gender: str = "male"  # "male"/"female"
    total_bilirubin: float = 1.2
    direct_bilirubin: float = 0.3
    alkaline_phosphatase: float = 120
    alanine_aminotransferase: float = 35
    aspartate_aminotransferase: float = 40
    total_proteins: float = 7.5
    albumin: float = 4.2
    albumin_globulin_ratio: float = 1.8

    def update(self, **changes: Any) -> "PatientData":
        return replace(self, **changes)

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "PatientData":
        """Build a snapshot from raw widget/PDF values; unparsable numbers become NaN."""
        values: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in raw:
                continue
            v = raw[f.name]
            if f.name in INT_FIELDS:
                values[f.name] = parse_int(v)
            elif f.name in FLOAT_FIELDS:
                values[f.name] = parse_float(v)
            else:
                values[f.name] = str(v).lower()
        return cls(**values)

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class PredictionResult:
    risk: RiskLevel
    confidence: float
    risk_factors: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    score: float = 0


@dataclass
class FieldSpec:
    name: str
    label: str
    normal: Optional[str] = None  # reference range shown as help text
    integer: bool = False


class HealthModule(Protocol):
    id: str
    title: str
    def prefill(self, values: Dict[str, Any]) -> None: ...
    def inputs(self, data: PatientData) -> PatientData: ...
    def compute(self, data: PatientData) -> PredictionResult: ...
    def render(self, result: Optional[PredictionResult]) -> None: ...
    def to_pdf(self, data: PatientData) -> List[list[str]]: ...
