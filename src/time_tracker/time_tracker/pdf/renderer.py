from __future__ import annotations

from typing import Protocol

from ..core.exceptions import DeliveryError


class PdfRenderer(Protocol):
    def render(self, html: str) -> bytes:
        """Return the PDF bytes for ``html``; raise DeliveryError on failure."""

        raise NotImplementedError


class DisabledPdfRenderer:
    """Used when PDF_ENABLED is off: any PDF request fails the delivery."""

    def render(self, html: str) -> bytes:
        raise DeliveryError("PDF rendering is disabled on this server")
