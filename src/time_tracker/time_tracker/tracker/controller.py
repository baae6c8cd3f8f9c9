from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.datetime_utils import (
    format_date_label,
    format_duration,
    format_time_of_day,
    now_local,
    parse_iso_date,
    time_options,
)
from ..container import Container
from ..core.constants import SESSION_COOKIE_HEADROOM
from ..core.exceptions import ValidationError
from ..entries.model import TrackerState
from ..reports.builder import build_report_payload

logger = logging.getLogger(__name__)

SESSION_KEY = "tracker"


def register(app: Flask, container: Container) -> None:
    tracker = container.tracker_service

    app.jinja_env.filters["time_label"] = format_time_of_day
    app.jinja_env.filters["duration_label"] = format_duration

    def _load_state() -> TrackerState:
        today = now_local().date().strftime("%Y-%m-%d")
        return TrackerState.from_session(session.get(SESSION_KEY), default_date=today)

    def _save_state(state: TrackerState) -> None:
        data = state.to_session()
        serializer = app.session_interface.get_signing_serializer(app)
        if serializer is not None:
            size = len(serializer.dumps({**session, SESSION_KEY: data}))
            if size > app.config["MAX_COOKIE_SIZE"] - SESSION_COOKIE_HEADROOM:
                logger.warning("Tracker state of %d bytes does not fit the session cookie", size)
                raise ValidationError(
                    "Too much data for one day's form. Send the report or remove some projects first."
                )
        session[SESSION_KEY] = data

    def _date_label(state: TrackerState) -> str:
        return format_date_label(parse_iso_date(state.selected_date))

    def _apply_profile_fields(state: TrackerState) -> TrackerState:
        if "user_name" not in request.form:
            return state
        return tracker.update_profile(
            state,
            user_name=request.form.get("user_name", ""),
            user_email=request.form.get("user_email", ""),
            selected_date=request.form.get("selected_date", ""),
        )

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        state = _load_state()
        return render_template(
            "tracker.html",
            state=state,
            date_label=_date_label(state),
            timeline=tracker.timeline(state),
            stats=tracker.stats(state).to_payload(),
            time_options=time_options(),
        )

    @app.route("/profile", methods=["POST"], endpoint="update_profile")
    def update_profile():
        try:
            _save_state(_apply_profile_fields(_load_state()))
        except ValidationError as e:
            flash(str(e), "warning")
        return redirect(url_for("index"))

    @app.route("/entries", methods=["POST"], endpoint="add_entry")
    def add_entry():
        state = _load_state()
        try:
            state = _apply_profile_fields(state)
            state = tracker.add_entry(
                state,
                name=request.form.get("name", ""),
                start_time=request.form.get("start_time", ""),
                end_time=request.form.get("end_time", ""),
                description=request.form.get("description", ""),
            )
            _save_state(state)
        except ValidationError as e:
            flash(str(e), "danger")
        return redirect(url_for("index"))

    @app.route("/entries/<entry_id>/delete", methods=["POST"], endpoint="remove_entry")
    def remove_entry(entry_id: str):
        _save_state(tracker.remove_entry(_load_state(), entry_id))
        return redirect(url_for("index"))

    @app.route("/report/send", methods=["POST"], endpoint="send_report")
    def send_report():
        state = _load_state()
        try:
            state = _apply_profile_fields(state)
            _save_state(state)
            report = build_report_payload(
                state.user_name,
                _date_label(state),
                state.entries,
                state.user_email,
                request.form.get("format"),
            )
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("index"))

        try:
            result = container.new_dispatcher().send(report)
        except Exception:
            logger.exception("Report dispatch crashed")
            flash("Failed to send report", "danger")
            return redirect(url_for("index"))

        if result.ok:
            if report.additional_email:
                detail = f"Daily report has been sent to HR manager and your email ({report.additional_email})."
            else:
                detail = "Daily report has been sent to HR manager."
            flash(f"{detail} You will receive a confirmation email shortly.", "success")
            _save_state(tracker.clear_entries(state))
        else:
            flash(result.message or "Failed to send report", "danger")
        return redirect(url_for("index"))
