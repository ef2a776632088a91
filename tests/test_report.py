from core.report import build_pdf
from core.types import PatientData
from modules.cirrhosis import cirrhosis
from modules.cirrhosis.scores import score


def test_pdf_report_bytes():
    data = PatientData(age=70, albumin=3.0)
    result = score(data)
    pdf = build_pdf(patient=data, rows=cirrhosis.to_pdf(data), result=result)
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 1000


def test_report_rows_cover_every_field():
    rows = cirrhosis.to_pdf(PatientData(albumin=float("nan")))
    labels = [r[0] for r in rows]
    assert labels[0] == "Age"
    assert "Gender" not in labels
    assert "Albumin" in labels
    assert len(rows) == 9
    assert dict((r[0], r[1]) for r in rows)["Albumin"] == "—"
