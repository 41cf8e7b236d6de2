"""
ROI Report PDF.

Renders the plain-text ROI report with fpdf2 (pure Python, no system
dependencies). The PDF is built from compose_report() output line by line,
so every figure matches the .txt report exactly.
"""

from fpdf import FPDF

from .report_generator import RULE


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("•", "-")    # bullet
        .replace("✓", "*")    # check mark
        .replace("—", " - ")  # em dash
        .replace("–", "-")    # en dash
        .replace("“", '"')    # left double quote
        .replace("”", '"')    # right double quote
        .replace("‘", "'")    # left single quote
        .replace("’", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class ReportPDF(FPDF):
    """PDF layout for the ROI report."""

    def __init__(self, company_name=""):
        super().__init__()
        self.company_name = company_name
        self.set_auto_page_break(auto=True, margin=20)

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"{_safe(self.company_name)}  |  Page {self.page_no()}/{{nb}}", align="C")

    def title_block(self, title, subtitle):
        self.set_font("Helvetica", "B", 16)
        self.cell(0, 10, _safe(title), new_x="LMARGIN", new_y="NEXT")
        self.set_font("Helvetica", "", 9)
        self.set_text_color(100, 100, 100)
        self.cell(0, 5, _safe(subtitle), new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(4)

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {_safe(title)}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def body_line(self, text):
        # Sub-headings inside a section ("PAYBACK ANALYSIS:", check-mark items) are bold
        bold = (text.endswith(":") and text.isupper()) or text.startswith("✓")
        self.set_font("Helvetica", "B" if bold else "", 9)
        self.set_x(self.l_margin)
        self.multi_cell(0, 4.5, _safe(text), new_x="LMARGIN", new_y="NEXT")


def generate_report_pdf(report_text: str, company_name: str = "") -> bytes:
    """
    Lay out a compose_report() string as a PDF.

    A line directly followed by the section rule becomes a section header;
    the rule itself is dropped. Blank lines become small gaps.

    Returns:
        PDF bytes
    """
    lines = report_text.lstrip("\n").splitlines()
    pdf = ReportPDF(company_name=company_name)
    pdf.alias_nb_pages()
    pdf.add_page()

    title = lines[0] if lines else ""
    subtitle = lines[1] if len(lines) > 1 else ""
    pdf.title_block(title, subtitle)

    body = lines[2:]
    for i, line in enumerate(body):
        if line == RULE:
            continue
        if i + 1 < len(body) and body[i + 1] == RULE:
            pdf.ln(2)
            pdf.section_header(line)
            continue
        if not line.strip():
            pdf.ln(2)
            continue
        pdf.body_line(line)

    return bytes(pdf.output())
