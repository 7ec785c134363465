from __future__ import annotations

import pytest

import zabanyar.main as main_module


@pytest.mark.asyncio
async def test_landing_page_is_rtl_and_links_operational_endpoints() -> None:
    response = await main_module.landing_page()
    payload = response.body.decode("utf-8")

    assert response.status_code == 200
    assert "Zabanyar API" in payload
    assert 'dir="rtl"' in payload
    for href in ("/docs", "/health", "/ready", "/metrics"):
        assert f'href="{href}"' in payload
    assert "API prefix: /api/v1" in payload


def test_all_domain_routers_are_mounted_under_api_prefix() -> None:
    paths = set(main_module.app.openapi()["paths"])

    for expected in (
        "/api/v1/identity/auth/register",
        "/api/v1/registration/teacher/complete",
        "/api/v1/teachers",
        "/api/v1/student-profile",
        "/api/v1/teachers/{teacher_id}/schedule",
        "/api/v1/bookings",
        "/api/v1/teacher-earnings",
        "/api/v1/classes",
        "/api/v1/dashboard/teacher/{teacher_id}",
        "/api/v1/notifications",
        "/api/v1/writing-practice/submit",
        "/api/v1/listening-practice/submit",
        "/api/v1/news-articles/articles",
        "/api/v1/upload-avatar",
        "/api/v1/admin/stats",
    ):
        assert expected in paths
