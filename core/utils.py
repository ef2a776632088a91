import math
import re
import streamlit as st
from typing import Any

PALETTE = {
    "Low": "#2e7d32",
    "Moderate": "#f9a825",
    "High": "#ef6c00",
    "Critical": "#c62828",
    "factor": "#e65100",
    "recommendation": "#1565c0",
    "info": "#455a64",
}

_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(value: Any) -> float:
    """Leading-integer parse: "12.7" -> 12, "abc" -> nan. Never raises."""
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return int(value) if math.isfinite(value) else math.nan
    m = _INT_RE.match(str(value))
    return int(m.group(1)) if m else math.nan


def parse_float(value: Any) -> float:
    """Leading-decimal parse: "3.5 g/dL" -> 3.5, "" -> nan. Never raises."""
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    m = _FLOAT_RE.match(str(value))
    return float(m.group(1)) if m else math.nan


def fmt_value(value: Any) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "—"
        return f"{value:g}"
    return str(value)


def color_box(text: str, level: str = "info"):
    col = PALETTE.get(level, "#455a64")
    st.markdown(
        f"""
        <div style=\"background:{col};padding:12px;border-radius:8px;color:white;font-weight:600;margin-bottom:6px;\">{text}</div>
        """,
        unsafe_allow_html=True,
    )
