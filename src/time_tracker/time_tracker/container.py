from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from .core.constants import (
    DEFAULT_APP_NAME,
    DEFAULT_COMPANY_NAME,
    DEFAULT_HR_EMAIL,
    DEFAULT_REPORT_TIMEOUT_SECONDS,
)
from .entries.service import TrackerService
from .mail.sender import Mailer
from .mail.smtp_sender import SMTPConfig, SmtpMailer
from .pdf.renderer import DisabledPdfRenderer, PdfRenderer
from .reports.dispatcher import HttpTransport, LocalTransport, ReportDispatcher, ReportTransport
from .reports.renderer import ReportRenderer
from .reports.service import ReportDeliveryService


@dataclass(frozen=True)
class Container:
    mailer: Mailer
    pdf_renderer: PdfRenderer
    report_renderer: ReportRenderer

    tracker_service: TrackerService
    delivery_service: ReportDeliveryService
    transport: ReportTransport

    def new_dispatcher(self) -> ReportDispatcher:
        return ReportDispatcher(self.transport)


def _default_pdf_renderer(enabled: bool) -> PdfRenderer:
    if not enabled:
        return DisabledPdfRenderer()
    # Playwright is only imported when PDF output is switched on.
    from .pdf.playwright_renderer import PlaywrightPdfRenderer

    return PlaywrightPdfRenderer()


def build_container(
    *,
    settings: Mapping[str, Any],
    mailer: Optional[Mailer] = None,
    pdf_renderer: Optional[PdfRenderer] = None,
    transport_factory: Optional[Callable[[ReportDeliveryService], ReportTransport]] = None,
) -> Container:
    mail_config = dict(settings.get("MAIL_CONFIG") or {})
    if mailer is None:
        mailer = SmtpMailer(
            SMTPConfig(
                host=str(mail_config.get("host", "localhost")),
                port=int(mail_config.get("port", 587)),
                user=str(mail_config.get("user", "")),
                password=str(mail_config.get("password", "")),
                use_tls=bool(mail_config.get("use_tls", True)),
                from_name=str(mail_config.get("from_name", DEFAULT_APP_NAME)),
            )
        )
    if pdf_renderer is None:
        pdf_renderer = _default_pdf_renderer(bool(settings.get("PDF_ENABLED", False)))

    report_renderer = ReportRenderer(company_name=str(settings.get("COMPANY_NAME", DEFAULT_COMPANY_NAME)))
    delivery_service = ReportDeliveryService(
        mailer,
        pdf_renderer,
        report_renderer,
        hr_email=str(settings.get("HR_EMAIL", DEFAULT_HR_EMAIL)),
    )

    if transport_factory is not None:
        transport = transport_factory(delivery_service)
    elif settings.get("REPORT_ENDPOINT_URL"):
        transport = HttpTransport(
            str(settings["REPORT_ENDPOINT_URL"]),
            timeout=float(settings.get("REPORT_TIMEOUT_SECONDS", DEFAULT_REPORT_TIMEOUT_SECONDS)),
        )
    else:
        transport = LocalTransport(delivery_service.handle)

    return Container(
        mailer=mailer,
        pdf_renderer=pdf_renderer,
        report_renderer=report_renderer,
        tracker_service=TrackerService(),
        delivery_service=delivery_service,
        transport=transport,
    )
