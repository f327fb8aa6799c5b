"""
Depreciation schedule PDF using ReportLab.
"""
import io
from datetime import date
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from assetdesk.core.depreciation import DepreciationSnapshot, PortfolioSummary

HEADER_COLOR = colors.HexColor("#1f3a5f")
LIGHT_GRAY = colors.HexColor("#f5f5f5")
DARK_GRAY = colors.HexColor("#333333")
WARNING_COLOR = colors.HexColor("#fff4e5")

SCHEDULE_COLUMNS = [
    "Asset",
    "Description",
    "Purchased",
    "Life (y)",
    "Age (m)",
    "Cost",
    "Monthly",
    "Accumulated",
    "Book value",
    "Dep. %",
]


def _styles():
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(
        name="ReportTitle",
        fontSize=14,
        fontName="Helvetica-Bold",
        textColor=colors.white,
    ))
    styles.add(ParagraphStyle(
        name="SectionTitle",
        fontSize=10,
        fontName="Helvetica-Bold",
        textColor=HEADER_COLOR,
        spaceBefore=8,
        spaceAfter=4,
    ))
    styles.add(ParagraphStyle(
        name="Cell",
        fontSize=7,
        fontName="Helvetica",
        textColor=DARK_GRAY,
    ))
    styles.add(ParagraphStyle(
        name="Footnote",
        fontSize=7,
        fontName="Helvetica-Oblique",
        textColor=colors.gray,
    ))
    return styles


def _money(value) -> str:
    return f"{value:,.2f}"


def _header(title: str, as_of: date, styles) -> Table:
    data = [[
        Paragraph(f"<b>{escape(title)}</b>", styles["ReportTitle"]),
        Paragraph(f"Valued as of {as_of.isoformat()}", styles["Cell"]),
    ]]
    t = Table(data, colWidths=[18 * cm, 7.7 * cm])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("TOPPADDING", (0, 0), (-1, 0), 8),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
        ("LEFTPADDING", (0, 0), (-1, 0), 6),
        ("VALIGN", (0, 0), (-1, 0), "MIDDLE"),
    ]))
    return t


def _summary_table(summary: PortfolioSummary, styles) -> Table:
    rows = [
        ("Assets", str(summary.asset_count)),
        ("Total cost", _money(summary.total_cost)),
        ("Accumulated depreciation", _money(summary.total_accumulated_depreciation)),
        ("Book value", _money(summary.total_book_value)),
        ("Monthly depreciation", _money(summary.total_monthly_depreciation)),
        ("Average useful life (years)", str(summary.average_useful_life_years)),
    ]
    data = [[Paragraph(k, styles["Cell"]), Paragraph(v, styles["Cell"])] for k, v in rows]
    t = Table(data, colWidths=[8 * cm, 5 * cm])
    t.setStyle(TableStyle([
        ("GRID", (0, 0), (-1, -1), 0.5, colors.lightgrey),
        ("ROWBACKGROUNDS", (0, 0), (-1, -1), [colors.white, LIGHT_GRAY]),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
    ]))
    return t


def _schedule_table(rows: list[tuple], styles) -> Table:
    data = [SCHEDULE_COLUMNS]
    near_end = []
    for i, (asset, snap) in enumerate(rows, start=1):
        data.append([
            asset.id,
            Paragraph(escape(asset.description or ""), styles["Cell"]),
            asset.purchase_date.isoformat() if asset.purchase_date else "-",
            str(snap.useful_life_years),
            str(snap.age_in_months),
            _money(snap.cost),
            _money(snap.monthly_depreciation),
            _money(snap.accumulated_depreciation),
            _money(snap.current_book_value),
            f"{snap.depreciation_percent}%",
        ])
        if snap.is_near_end_of_life:
            near_end.append(i)

    t = Table(
        data,
        colWidths=[2.4 * cm, 6 * cm, 2.2 * cm, 1.5 * cm, 1.5 * cm,
                   2.4 * cm, 2.2 * cm, 2.6 * cm, 2.6 * cm, 1.8 * cm],
        repeatRows=1,
    )
    style = [
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 7),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.lightgrey),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, LIGHT_GRAY]),
        ("ALIGN", (3, 1), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
    for row in near_end:
        style.append(("BACKGROUND", (0, row), (-1, row), WARNING_COLOR))
    t.setStyle(TableStyle(style))
    return t


def generate_depreciation_report(
    rows: list[tuple[object, DepreciationSnapshot]],
    summary: PortfolioSummary,
    as_of: date,
    title: str = "Depreciation schedule",
) -> bytes:
    """rows are (asset, snapshot) pairs; assets near end of life are highlighted."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=landscape(A4), rightMargin=1.5 * cm,
                            leftMargin=1.5 * cm, topMargin=1.5 * cm, bottomMargin=1.5 * cm)
    styles = _styles()
    story = [
        _header(title, as_of, styles),
        Spacer(1, 0.4 * cm),
        Paragraph("SUMMARY", styles["SectionTitle"]),
        _summary_table(summary, styles),
        Spacer(1, 0.3 * cm),
        Paragraph("SCHEDULE", styles["SectionTitle"]),
    ]
    if rows:
        story.append(_schedule_table(rows, styles))
    else:
        story.append(Paragraph("No assets on the books.", styles["Cell"]))

    story += [
        Spacer(1, 0.5 * cm),
        Paragraph(
            f"Generated on {date.today().isoformat()}. Straight-line method, "
            "age counted in whole calendar months.",
            styles["Footnote"],
        ),
    ]
    doc.build(story)
    return buf.getvalue()
