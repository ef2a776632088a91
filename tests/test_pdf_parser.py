import math

from core.pdf_parser import extract_fields
from core.types import PatientData

REPORT = """
Patient Name: Jane Roe      Age: 62 Years      Sex: Female
LIVER FUNCTION TEST
Bilirubin Total 2.4 mg/dL 0.2 - 1.2
Bilirubin Direct 0.7 mg/dL 0.0 - 0.3
Alkaline Phosphatase 160 U/L 44 - 147
SGPT (ALT) 58 U/L 7 - 56
SGOT (AST) 61 U/L 10 - 40
Total Protein 6.1 g/dL 6.3 - 8.2
Albumin 3.2 g/dL 3.5 - 5.0
A/G Ratio 0.9 1.1 - 2.5
Page: 1 of 1
"""


def test_extract_liver_panel():
    out = extract_fields(REPORT)
    assert out["gender"] == "female"
    assert out["age"] == "62"
    assert out["total_bilirubin"] == "2.4"
    assert out["direct_bilirubin"] == "0.7"
    assert out["alkaline_phosphatase"] == "160"
    assert out["alanine_aminotransferase"] == "58"
    assert out["aspartate_aminotransferase"] == "61"
    assert out["total_proteins"] == "6.1"
    assert out["albumin"] == "3.2"
    assert out["albumin_globulin_ratio"] == "0.9"


def test_extracted_values_build_a_snapshot():
    p = PatientData.from_raw(extract_fields(REPORT))
    assert p.age == 62
    assert p.albumin == 3.2
    assert p.alanine_aminotransferase == 58


def test_albumin_in_g_per_litre_is_converted():
    out = extract_fields("Albumin 32 g/L\n")
    assert float(out["albumin"]) == 3.2


def test_missing_values_are_omitted():
    out = extract_fields("Sex: M\nHaemoglobin 13.5 g/dL\n")
    assert out == {"gender": "male"}
    p = PatientData.from_raw(out)
    assert not math.isnan(p.albumin)


def test_empty_text():
    assert extract_fields("") == {}
