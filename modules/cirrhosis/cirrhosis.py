from typing import Any, Dict, List, Optional
import streamlit as st
from core.types import FieldSpec, PatientData, PredictionResult
from core.utils import color_box, fmt_value
from .scores import score

id = "cirrhosis"
title = "Liver Cirrhosis Risk Analysis"

DISCLAIMER = (
    "**Medical Disclaimer:** This prediction is for educational and research purposes only. "
    "Always consult with qualified healthcare professionals for proper medical diagnosis and treatment decisions."
)

GROUPS = [
    ("Demographics", [
        FieldSpec("age", "Age", "1-120 years", integer=True),
    ]),
    ("Bilirubin Levels (mg/dL)", [
        FieldSpec("total_bilirubin", "Total Bilirubin", "Normal: 0.2-1.2 mg/dL"),
        FieldSpec("direct_bilirubin", "Direct Bilirubin", "Normal: 0.0-0.3 mg/dL"),
    ]),
    ("Liver Enzymes (U/L)", [
        FieldSpec("alkaline_phosphatase", "Alkaline Phosphatase", "Normal: 44-147 U/L", integer=True),
        FieldSpec("alanine_aminotransferase", "ALT (Alanine Aminotransferase)", "Normal: 7-56 U/L", integer=True),
        FieldSpec("aspartate_aminotransferase", "AST (Aspartate Aminotransferase)", "Normal: 10-40 U/L", integer=True),
    ]),
    ("Protein Levels (g/dL)", [
        FieldSpec("total_proteins", "Total Proteins", "Normal: 6.3-8.2 g/dL"),
        FieldSpec("albumin", "Albumin", "Normal: 3.5-5.0 g/dL"),
        FieldSpec("albumin_globulin_ratio", "Albumin/Globulin Ratio", "Normal: 1.1-2.5"),
    ]),
]

GENDERS = ["male", "female"]


def _key(name: str) -> str:
    return f"cirr_{name}"


def prefill(values: Dict[str, Any]) -> None:
    """Push parsed values into the widgets; call before inputs() renders them."""
    for name, v in values.items():
        if name == "gender":
            if v in GENDERS:
                st.session_state[_key(name)] = v
        else:
            st.session_state[_key(name)] = str(v)


def _txt(spec: FieldSpec, data: PatientData) -> str:
    # Text widgets so unparsable entries degrade to NaN instead of being rejected.
    k = _key(spec.name)
    if k not in st.session_state:
        st.session_state[k] = fmt_value(getattr(data, spec.name))
    return st.text_input(spec.label, key=k, help=spec.normal)


def inputs(data: PatientData) -> PatientData:
    raw: Dict[str, Any] = {}
    for heading, specs in GROUPS:
        st.markdown(f"**{heading}**")
        cols = st.columns(2)
        if heading == "Demographics":
            with cols[1]:
                k = _key("gender")
                if k not in st.session_state:
                    st.session_state[k] = data.gender if data.gender in GENDERS else GENDERS[0]
                raw["gender"] = st.selectbox("Gender", GENDERS, format_func=str.title, key=k)
        for i, spec in enumerate(specs):
            with cols[i % 2]:
                raw[spec.name] = _txt(spec, data)
    return data.update(**PatientData.from_raw(raw).as_dict())


def compute(data: PatientData) -> PredictionResult:
    return score(data)


def render(result: Optional[PredictionResult]) -> None:
    if result is None:
        st.info('Enter patient data and click "Analyze Risk" to get prediction')
        return

    color_box(f"Risk Level: {result.risk.value} • Confidence: {result.confidence:.1f}%", level=result.risk.value)

    if result.risk_factors:
        st.markdown("#### Identified Risk Factors")
        for f in result.risk_factors:
            color_box(f"⚠ {f}", level="factor")

    st.markdown("#### Clinical Recommendations")
    for r in result.recommendations:
        color_box(f"✓ {r}", level="recommendation")

    st.caption(DISCLAIMER)


def to_pdf(data: PatientData) -> List[list[str]]:
    rows = []
    for heading, specs in GROUPS:
        for spec in specs:
            rows.append([spec.label, fmt_value(getattr(data, spec.name)), spec.normal or "—"])
    return rows
