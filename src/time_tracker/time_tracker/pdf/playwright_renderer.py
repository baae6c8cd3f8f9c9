from __future__ import annotations

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from ..core.exceptions import DeliveryError

logger = logging.getLogger(__name__)


class PlaywrightPdfRenderer:
    """Render HTML to PDF with headless Chromium.

    A fresh browser is launched per report and closed before returning.
    """

    def __init__(self, *, page_format: str = "A4", margin: str = "20px"):
        self._page_format = page_format
        self._margin = margin

    def render(self, html: str) -> bytes:
        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(headless=True)
                try:
                    page = browser.new_page()
                    page.set_content(html, wait_until="networkidle")
                    pdf = page.pdf(
                        format=self._page_format,
                        print_background=True,
                        margin={side: self._margin for side in ("top", "right", "bottom", "left")},
                    )
                finally:
                    browser.close()
        except PlaywrightError as e:
            logger.exception("PDF rendering failed")
            raise DeliveryError(f"PDF generation failed: {e}") from e
        return pdf
