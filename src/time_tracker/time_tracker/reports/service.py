from __future__ import annotations

import logging
import re
from typing import Any

from ..core.enums import ReportFormat
from ..core.exceptions import ValidationError
from ..mail.model import Attachment, OutgoingEmail
from ..mail.sender import Mailer
from ..pdf.renderer import PdfRenderer
from .model import ReportRequest
from .renderer import ReportRenderer

logger = logging.getLogger(__name__)


def attachment_filename(request: ReportRequest, extension: str) -> str:
    slug = re.sub(r"[^A-Za-z0-9]+", "-", f"{request.user_name} {request.date}").strip("-").lower()
    return f"daily-report-{slug or 'report'}.{extension}"


class ReportDeliveryService:
    """Server side of "send report": render, optionally print to PDF, email once.

    Either the whole delivery succeeds or the first failure propagates; there
    is no partially delivered state and no retry.
    """

    def __init__(
        self,
        mailer: Mailer,
        pdf_renderer: PdfRenderer,
        renderer: ReportRenderer,
        *,
        hr_email: str,
    ):
        self._mailer = mailer
        self._pdf = pdf_renderer
        self._renderer = renderer
        self._hr_email = hr_email

    def recipients(self, request: ReportRequest) -> tuple[str, ...]:
        out = [self._hr_email]
        if request.additional_email:
            out.append(request.additional_email)
        return tuple(out)

    def build_email(self, request: ReportRequest) -> OutgoingEmail:
        html = self._renderer.render_html(request)

        attachments: list[Attachment] = []
        if request.report_format == ReportFormat.PDF:
            attachments.append(
                Attachment(
                    filename=attachment_filename(request, "pdf"),
                    content=self._pdf.render(html),
                    mimetype="application/pdf",
                )
            )
        elif request.report_format == ReportFormat.HTML:
            attachments.append(
                Attachment(
                    filename=attachment_filename(request, "html"),
                    content=html.encode("utf-8"),
                    mimetype="text/html",
                )
            )

        return OutgoingEmail(
            recipients=self.recipients(request),
            subject=self._renderer.subject(request),
            text=self._renderer.render_text(request),
            html=html,
            attachments=tuple(attachments),
        )

    def deliver(self, request: ReportRequest) -> str:
        email = self.build_email(request)
        self._mailer.send(email)
        logger.info(
            "Daily report for %s (%d entries, format=%s) delivered to %s",
            request.user_name,
            request.stats.total_entries,
            request.report_format.value if request.report_format else "none",
            ", ".join(email.recipients),
        )

        message = "Daily report sent successfully to HR manager"
        if request.additional_email:
            message = f"{message} and {request.additional_email}"
        return message

    def handle(self, data: Any) -> tuple[dict, int]:
        """Body and status code of the report endpoint for a decoded JSON body.

        The single top-level catch for a delivery: validation problems map to
        400, anything raised while rendering or mailing maps to 500.
        """
        try:
            report = ReportRequest.from_payload(data)
        except ValidationError as e:
            return {"error": str(e)}, 400

        try:
            message = self.deliver(report)
        except Exception as e:
            logger.exception("Error sending report")
            return {"error": f"Failed to send report: {e}"}, 500

        return {"success": True, "message": message}, 200
