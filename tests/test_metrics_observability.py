from __future__ import annotations

import pytest
from fastapi import Request, Response

import zabanyar.main as main_module
from zabanyar.core.metrics import (
    build_metrics_response,
    instrument_http_request,
    record_registration,
    record_side_effect_failure,
)


def _make_request(path: str) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "headers": [],
        "client": ("127.0.0.1", 12345),
        "scheme": "http",
        "server": ("testserver", 80),
        "query_string": b"",
    }
    return Request(scope)


@pytest.mark.asyncio
async def test_http_metrics_instrumentation_tracks_status_and_path() -> None:
    async def _no_content(_: Request) -> Response:
        return Response(status_code=204)

    await instrument_http_request(_make_request("/health"), _no_content)

    payload = build_metrics_response().body.decode("utf-8")
    assert "zabanyar_http_requests_total" in payload
    assert 'path="/health"' in payload
    assert 'status_code="204"' in payload


def test_domain_counters_are_exported() -> None:
    record_registration("teacher", "rejected")
    record_side_effect_failure("booking_notification")

    payload = build_metrics_response().body.decode("utf-8")
    assert 'zabanyar_registration_submissions_total{outcome="rejected",wizard="teacher"}' in payload
    assert 'zabanyar_side_effect_failures_total{effect="booking_notification"}' in payload


@pytest.mark.asyncio
async def test_metrics_endpoint_exposes_prometheus_payload() -> None:
    response = await main_module.metrics_endpoint(_make_request("/metrics"))

    assert response.status_code == 200
    assert "zabanyar_http_requests_total" in response.body.decode("utf-8")
