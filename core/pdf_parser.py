import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import pdfplumber
import streamlit as st

log = logging.getLogger(__name__)


@dataclass
class Parsed:
    values: Dict[str, Any] = field(default_factory=dict)
    raw_text: str = ""


# ----------------------------
# Patterns that extract values
# ----------------------------
_NUM = r"(\d+(?:\.\d+)?)"

STRICT: Dict[str, str] = {
    # Demographics
    "gender": r"(?:Sex|Gender)\s*[:\-]\s*(Male|Female|M|F)\b",
    "age": r"\bAge\s*[:\-]\s*(\d{1,3})",

    # Bilirubin (value just before the unit)
    "total_bilirubin": r"(?:Total\s+Bilirubin|Bilirubin[\s,(\-]*Total)[^\n]{0,60}?" + _NUM + r"(?=[^\n]{0,20}mg/?dL)",
    "direct_bilirubin": r"(?:Direct\s+Bilirubin|Conjugated\s+Bilirubin|Bilirubin[\s,(\-]*Direct)[^\n]{0,60}?" + _NUM + r"(?=[^\n]{0,20}mg/?dL)",

    # Enzymes
    "alkaline_phosphatase": r"(?:Alkaline\s+Phosphatase|\bALP\b)[^\n]{0,60}?" + _NUM + r"(?=[^\n]{0,20}(?:U/?L|IU/?L))",
    "alanine_aminotransferase": r"(?:\bALT\b|\bSGPT\b|Alanine\s+(?:Amino)?transferase)[^\n]{0,60}?" + _NUM + r"(?=[^\n]{0,20}(?:U/?L|IU/?L))",
    "aspartate_aminotransferase": r"(?:\bAST\b|\bSGOT\b|Aspartate\s+(?:Amino)?transferase)[^\n]{0,60}?" + _NUM + r"(?=[^\n]{0,20}(?:U/?L|IU/?L))",

    # Proteins
    "total_proteins": r"(?:Total\s+Proteins?|Proteins?[\s,(\-]*Total)[^\n]{0,60}?" + _NUM + r"(?=[^\n]{0,20}g/?[dD]?[lL])",
    "albumin": r"\bAlbumin\b(?!\s*[/:]\s*Globulin)[^\n]{0,60}?" + _NUM + r"(?=[^\n]{0,20}g/?[dD]?[lL])",
    "albumin_globulin_ratio": r"(?:A\s*[/:]\s*G\s+Ratio|Albumin\s*[/:]\s*Globulin(?:\s+Ratio)?)[^\n]{0,40}?" + _NUM,
}

# Fallback (looser) patterns for demographics
LOOSE = {
    "gender": r"(?:Sex|Gender)[^\n]{0,20}?\b(Male|Female|M|F)\b",
    "age": r"\bAge\b[^\d]{0,20}(\d{1,3})",
}


def _find(pattern: str, text: str) -> Optional[str]:
    m = re.search(pattern, text, flags=re.I)
    return m.group(1).strip() if m else None


def extract_fields(raw_text: str) -> Dict[str, Any]:
    """Pull patient fields out of lab report text. Missing values are omitted."""
    out: Dict[str, Any] = {}
    if not raw_text:
        return out
    # normalise whitespace a bit
    t = re.sub(r"[^\S\r\n]+", " ", raw_text, flags=re.M)

    # --- Demographics ---
    sex = _find(STRICT["gender"], t) or _find(LOOSE["gender"], t)
    if sex:
        out["gender"] = "female" if sex[0].lower() == "f" else "male"
    age = _find(STRICT["age"], t) or _find(LOOSE["age"], t)
    if age:
        out["age"] = age

    # --- Labs ---
    for key, pat in STRICT.items():
        if key in ("gender", "age"):
            continue
        v = _find(pat, t)
        if v is not None:
            out[key] = v

    # Albumin / total protein: convert g/L -> g/dL if needed
    for key, label in (("albumin", r"\bAlbumin\b(?!\s*[/:]\s*Globulin)"), ("total_proteins", r"Total\s+Proteins?")):
        if key not in out:
            continue
        m = re.search(label + r"[^\n]{0,60}?(\d+(?:\.\d+)?)\s*(g/?dL|g/?L)", t, flags=re.I)
        if m and m.group(2).replace(" ", "").lower() in ("g/l", "gl"):
            out[key] = str(float(out[key]) / 10.0)
    return out


def read_pdf_text(fp) -> str:
    with pdfplumber.open(fp) as pdf:
        texts = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(texts)


def parse_pdf() -> Parsed:
    parsed = Parsed()
    with st.expander("Upload Lab PDF (optional)"):
        up = st.file_uploader("Upload lab PDF (text-based)", type=["pdf"])
        if up is None:
            return parsed
        try:
            parsed.raw_text = read_pdf_text(up)
        except Exception as e:
            log.warning("could not read uploaded PDF %s: %s", getattr(up, "name", "?"), e)
            st.warning("Could not read this PDF; enter values manually.")
            return parsed

        parsed.values = extract_fields(parsed.raw_text)
        # Show what we got
        if parsed.values:
            st.success("Parsed from PDF:")
            st.json(parsed.values)
        else:
            st.info("No recognisable liver panel values found.")
    return parsed
