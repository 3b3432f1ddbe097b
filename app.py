#!/usr/bin/env python3
"""
ProfileLift Web API

A Flask application serving the profile analysis to the browser front end.
Submit the four profile fields, poll (or stream) the job, then fetch the
result or download the text report.

Usage:
    python app.py
    # API listens on http://localhost:5050
"""

from __future__ import annotations

import json
import logging
import os
import queue
import threading
import time

from flask import Flask, Response, jsonify, request
from pydantic import ValidationError

from analyzer import AnalysisJob
from config import AppConfig
from models import PROFILE_FIELDS, ProfileInput, ProfileValidationError
from profile_strength import score_breakdown
from report import format_clipboard_text, format_export_text
from utils import setup_logging

app = Flask(__name__)
logger = logging.getLogger("profilelift.app")
app.secret_key = os.environ.get("FLASK_SECRET_KEY", "profilelift-dev-secret-change-in-production")
app.config["MAX_CONTENT_LENGTH"] = 1 * 1024 * 1024  # 1 MB request limit
app.config["APP_CONFIG"] = AppConfig.from_env()


# ── Security Headers ────────────────────────────────────────────────────────
@app.after_request
def set_security_headers(response):
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


# Thread-safe job storage
jobs: dict[str, AnalysisJob] = {}
jobs_lock = threading.Lock()


class UsageTracker:
    """Sliding one-hour request counter per client key."""

    def __init__(self):
        self._lock = threading.Lock()
        self._requests: dict[str, list[float]] = {}

    def check_and_record(self, key: str, limit: int) -> bool:
        if limit <= 0:
            return True
        with self._lock:
            now = time.time()
            self._drop_expired(now)
            times = self._requests.get(key, [])
            if len(times) >= limit:
                return False
            times.append(now)
            self._requests[key] = times
            return True

    def _drop_expired(self, now: float) -> None:
        """Trim timestamps older than an hour and forget keys left with none."""
        cutoff = now - 3600
        for key in list(self._requests):
            times = [t for t in self._requests[key] if t > cutoff]
            if times:
                self._requests[key] = times
            else:
                del self._requests[key]

    def reset(self) -> None:
        with self._lock:
            self._requests.clear()


usage_tracker = UsageTracker()


def _settings() -> AppConfig:
    return app.config["APP_CONFIG"]


def _cleanup_old_jobs() -> None:
    """Remove finished jobs older than the configured TTL."""
    cutoff = time.time() - _settings().job_ttl_seconds
    with jobs_lock:
        expired = [k for k, job in jobs.items() if job.created_at < cutoff and job.done]
        for k in expired:
            del jobs[k]


def _get_job(job_id: str) -> AnalysisJob | None:
    with jobs_lock:
        return jobs.get(job_id)


def _parse_profile() -> tuple[ProfileInput | None, tuple[Response, int] | None]:
    """Validate the JSON body into a ProfileInput, or build the error response."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, (jsonify({"error": "Request body must be a JSON object"}), 400)

    max_chars = _settings().max_field_chars
    too_long = [
        name for name in PROFILE_FIELDS
        if isinstance(data.get(name), str) and len(data[name]) > max_chars
    ]
    if too_long:
        return None, (jsonify({
            "error": f"Field(s) too long (maximum {max_chars:,} characters): {', '.join(too_long)}",
            "fields": too_long,
        }), 400)

    try:
        profile = ProfileInput.model_validate({k: data[k] for k in PROFILE_FIELDS if k in data})
        profile.validate_required()
    except ProfileValidationError as e:
        return None, (jsonify({"error": str(e), "fields": e.fields}), 400)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        return None, (jsonify({"error": "Profile fields must be strings", "fields": fields}), 400)
    return profile, None


# ─── Routes ─────────────────────────────────────────────────────────────────────


@app.route("/api/health")
def health():
    """Health check endpoint."""
    return jsonify({"status": "healthy"})


@app.route("/api/analyze", methods=["POST"])
def start_analysis():
    """Start an analysis job for the submitted profile."""
    _cleanup_old_jobs()
    settings = _settings()

    client_ip = request.remote_addr or "unknown"
    if not usage_tracker.check_and_record(client_ip, settings.rate_limit_per_hour):
        return jsonify({"error": "Rate limit exceeded. Please try again later."}), 429

    profile, error_response = _parse_profile()
    if error_response is not None:
        logger.info(f"[/api/analyze] Rejected invalid profile from {client_ip}")
        return error_response

    job = AnalysisJob(profile, delay_seconds=settings.analysis_delay_seconds)
    with jobs_lock:
        jobs[job.id] = job

    logger.info(
        f"[/api/analyze] New job {job.id}: client_ip={client_ip}, "
        f"headline_len={len(profile.headline)}, summary_len={len(profile.summary)}, "
        f"experience_len={len(profile.experience)}, skills_len={len(profile.skills)}"
    )
    job.start()
    return jsonify({"job_id": job.id})


@app.route("/api/score", methods=["POST"])
def score():
    """Return the strength breakdown immediately, without rewriting."""
    profile, error_response = _parse_profile()
    if error_response is not None:
        return error_response
    return jsonify(score_breakdown(profile).to_dict())


@app.route("/api/progress/<job_id>")
def progress_stream(job_id: str):
    """SSE endpoint for analysis progress."""
    job = _get_job(job_id)
    if job is None:
        return jsonify({"error": "Job not found"}), 404

    def generate():
        while True:
            try:
                event = job.events.get(timeout=10)
                yield f"data: {json.dumps(event)}\n\n"
                if event.get("status") in ("complete", "cancelled", "error"):
                    break
            except queue.Empty:
                if job.done:
                    yield f"data: {json.dumps({'status': job.status})}\n\n"
                    return
                yield f"data: {json.dumps({'status': 'keepalive'})}\n\n"

    return Response(
        generate(),
        mimetype="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )


@app.route("/api/result/<job_id>")
def get_result(job_id: str):
    """Get the result of a finished job."""
    job = _get_job(job_id)
    if job is None:
        return jsonify({"error": "Job not found"}), 404

    if job.status == "running":
        return jsonify({"status": "running"}), 202
    if job.status == "cancelled":
        return jsonify({"status": "cancelled"}), 409
    if job.status == "error":
        return jsonify({"status": "error", "error": job.error}), 500
    return jsonify({"status": "complete", "result": job.result.model_dump(by_alias=True)})


@app.route("/api/jobs/<job_id>", methods=["DELETE"])
def cancel_job(job_id: str):
    """Cancel a job whose analysis has not started yet."""
    job = _get_job(job_id)
    if job is None:
        return jsonify({"error": "Job not found"}), 404
    if not job.cancel():
        reason = "analysis already started" if job.status == "running" else f"job already {job.status}"
        return jsonify({"error": f"Job can no longer be cancelled: {reason}", "status": job.status}), 409
    logger.info(f"[/api/jobs] Cancellation requested for job {job_id}")
    return jsonify({"ok": True})


@app.route("/api/export/<job_id>")
def export_result(job_id: str):
    """Download the report (``format=report``) or clipboard text (``format=clipboard``)."""
    job = _get_job(job_id)
    if job is None:
        return jsonify({"error": "Job not found"}), 404
    if job.status != "complete":
        return jsonify({"error": "Results are not available", "status": job.status}), 409

    fmt = request.args.get("format", "report")
    if fmt == "report":
        body = format_export_text(job.profile, job.result)
        filename = "linkedin-profile-optimization.txt"
    elif fmt == "clipboard":
        body = format_clipboard_text(job.result)
        filename = "linkedin-profile-clipboard.txt"
    else:
        return jsonify({"error": "Invalid format"}), 400

    return Response(
        body,
        mimetype="text/plain",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


if __name__ == "__main__":
    setup_logging(verbose=_settings().verbose)
    port = int(os.environ.get("PORT", 5050))
    print(f"\n  ProfileLift API\n  ───────────────\n  Listening on http://localhost:{port}\n")
    app.run(host="0.0.0.0", port=port, debug=False, threaded=True)
