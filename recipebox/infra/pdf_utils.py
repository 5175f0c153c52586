import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet


def generate_pdf_for_shopping_list(shopping_list, week_key: str) -> bytes:
    """Printable shopping list: one table row per item, grouped by aisle, empty aisles left out."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Shopping List – Week of {week_key}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["", "Item", "Quantity", "Aisle"]]
    for category, items in shopping_list.items():
        for item in items:
            amount = " ".join(p for p in (item.get("quantity", ""), item.get("unit", "")) if p)
            data.append([
                "x" if item.get("checked") else "",
                item.get("item") or item.get("original", ""),
                amount or "-",
                category,
            ])

    if len(data) == 1:
        elements.append(Paragraph("Nothing to buy this week.", styles["Normal"]))
    else:
        table = Table(data, repeatRows=1)
        table.setStyle(TableStyle([
            ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
            ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
            ("ALIGN", (0,0), (0,-1), "CENTER"),
            ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
            ("FONTSIZE", (0,0), (-1,0), 12),
            ("BOTTOMPADDING", (0,0), (-1,0), 10),
            ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ]))
        elements.append(table)

    doc.build(elements)
    return buf.getvalue()
