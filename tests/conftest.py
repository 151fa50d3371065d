import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _render_pdf(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _render_pdf([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _render_pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _render_pdf([[]])


@pytest.fixture()
def investor_pdf_bytes() -> bytes:
    """Generate a subscription letter naming an investor, amount and address."""
    return _render_pdf(
        [
            [
                "Subscription Agreement",
                "Investor: Jane Doe, Amount: $50,000, Address: 1 Main St",
            ]
        ]
    )
