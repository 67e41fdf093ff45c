import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from diet.utilities.constants import DISPLAY_DATE_FORMAT

CURRENT_WEEK_BG = colors.HexColor("#DBEAFE")


def _signed(value):
    if not value:
        return "-"
    return f"{value:+d}"


def generate_pdf_for_plan(plan, summary=None, title="Reverse Diet Plan"):
    """Generate a PDF table of the plan: one row per week, current week highlighted."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    first, last = plan[0], plan[-1]
    elements = [
        Paragraph(title, styles["Title"]),
        Paragraph(
            f"{len(plan)} weeks, {first.start_date.strftime(DISPLAY_DATE_FORMAT)} – "
            f"{last.end_date.strftime(DISPLAY_DATE_FORMAT)}. "
            f"Projected change: {last.estimated_cumulative_weight_change_kg:+.2f} kg",
            styles["Normal"],
        ),
        Spacer(1, 16),
    ]

    data = [["Week", "Dates", "Phase", "Calories", "Change", "Est. TDEE",
             "Est. Weight Change (kg)", "Est. End Weight (kg)"]]
    for week in plan:
        data.append([
            week.week_number,
            f"{week.start_date.strftime(DISPLAY_DATE_FORMAT)} – {week.end_date.strftime(DISPLAY_DATE_FORMAT)}",
            week.phase_name.value,
            week.target_calories,
            _signed(week.calorie_change_from_previous_week),
            week.estimated_tdee_for_phase,
            f"{week.estimated_weekly_weight_change_kg:.2f}",
            f"{week.estimated_end_weight_kg:.2f}",
        ])

    style = [
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 11),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]
    current = (summary or {}).get("current_week")
    if current is not None:
        row = current.week_number  # header is row 0
        style.append(("BACKGROUND", (0,row), (-1,row), CURRENT_WEEK_BG))

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle(style))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
