import io
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, ListFlowable, ListItem
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib import colors
from core.types import PatientData, PredictionResult
from core.utils import PALETTE, fmt_value

DISCLAIMER = (
    "<b>Medical Disclaimer:</b> This prediction is for educational and research purposes only. "
    "Always consult with qualified healthcare professionals for proper medical diagnosis and treatment decisions."
)


def build_pdf(patient: PatientData, rows: list[list[str]], result: PredictionResult) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, title="Liver Cirrhosis Risk Report")
    styles = getSampleStyleSheet()
    story = []

    story.append(Paragraph("<b>Liver Cirrhosis Risk Report</b>", styles["Title"]))
    pinfo = (
        f"<b>Gender:</b> {patient.gender.title() if patient.gender else '—'} &nbsp;&nbsp; "
        f"<b>Age:</b> {fmt_value(patient.age)}"
    )
    story.append(Paragraph(pinfo, styles["Normal"]))
    story.append(Spacer(1, 8))

    if rows:
        tbl = Table(
            [["Parameter", "Value", "Reference"]] + rows,
            hAlign='LEFT',
            colWidths=[200, 100, 190]
        )
        tbl.setStyle(TableStyle([
            ('BACKGROUND', (0,0), (-1,0), colors.HexColor('#eeeeee')),
            ('GRID', (0,0), (-1,-1), 0.25, colors.grey),
            ('FONTNAME', (0,0), (-1,0), 'Helvetica-Bold'),
            ('ROWBACKGROUNDS', (0,1), (-1,-1), [colors.white, colors.HexColor('#fafafa')]),
        ]))
        story.append(tbl)

    story.append(Spacer(1, 10))
    col = PALETTE.get(result.risk.value, PALETTE["info"])
    story.append(Paragraph(f"<font color='{col}'><b>Risk Level: {result.risk.value}</b></font>", styles["Heading2"]))
    story.append(Paragraph(f"Confidence: {result.confidence:.1f}%", styles["Normal"]))

    if result.risk_factors:
        story.append(Paragraph("<b>Identified Risk Factors</b>", styles["Heading3"]))
        story.append(ListFlowable([ListItem(Paragraph(escape(f), styles["Normal"])) for f in result.risk_factors], bulletType="bullet"))

    story.append(Paragraph("<b>Clinical Recommendations</b>", styles["Heading3"]))
    story.append(ListFlowable([ListItem(Paragraph(escape(r), styles["Normal"])) for r in result.recommendations], bulletType="bullet"))

    story.append(Spacer(1, 10))
    story.append(Paragraph(DISCLAIMER, styles['Italic']))

    doc.build(story)
    return buf.getvalue()
