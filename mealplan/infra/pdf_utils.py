import io
from xml.sax.saxutils import escape
from typing import List, Optional
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealplan.domain.Recipe import Recipe
from mealplan.domain.Week import Week
from mealplan.logic.planning.durations import format_duration
from mealplan.logic.reporting.plan_summary import cooking_time_banner, describe_portions
from mealplan.logic.shopping.list_builder import ordered_categories


def generate_pdf_for_week(week: Week, recipes: List[Recipe], shopping_list: Optional[dict] = None):
    """Generate a PDF: batch table (Meal / Recipe / Days / Make / Prep / Cook) and the shopping list."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Batch Cooking Plan – Week {week.week_number}", styles["Title"]),
        Paragraph(cooking_time_banner(week), styles["Normal"]),
        Spacer(1, 16),
    ]

    recipe_index = {r.id: r for r in recipes}
    data = [["Meal", "Recipe", "Days", "Make", "Prep", "Cook"]]
    for meal, items in (("Lunch", week.lunches), ("Dinner", week.dinners)):
        for item in items:
            name = item.recipe_name + (" (family)" if item.is_family_meal else "")
            data.append([
                meal,
                name,
                ", ".join(day[:3] for day in item.days),
                describe_portions(item, recipe_index.get(item.recipe_id)),
                format_duration(item.prep_time),
                format_duration(item.cook_time),
            ])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))
    elements.append(table)

    if shopping_list:
        elements += [Spacer(1, 16), Paragraph("Shopping List", styles["Heading2"])]
        for category, items in ordered_categories(shopping_list):
            elements.append(Paragraph(escape(category), styles["Heading4"]))
            for ingredient in items:
                elements.append(Paragraph(f"• {escape(ingredient)}", styles["Normal"]))

    doc.build(elements)
    return buf.getvalue()
