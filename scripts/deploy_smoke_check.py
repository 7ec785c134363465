"""Post-deploy smoke checks executed from the app container."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from uuid import uuid4

BASE_URL = "http://localhost:8000"
API_PREFIX = "/api/v1"


def request(
    path: str,
    *,
    method: str = "GET",
    body: dict[str, str] | None = None,
    headers: dict[str, str] | None = None,
    expected: tuple[int, ...] = (200,),
) -> tuple[int, bytes]:
    payload = None
    req_headers = {"Accept": "application/json"}
    if headers:
        req_headers.update(headers)
    if body is not None:
        payload = json.dumps(body).encode("utf-8")
        req_headers["Content-Type"] = "application/json"

    request_obj = urllib.request.Request(
        f"{BASE_URL}{path}",
        data=payload,
        method=method,
        headers=req_headers,
    )
    try:
        with urllib.request.urlopen(request_obj, timeout=30) as response:
            content = response.read()
            status = response.getcode()
    except urllib.error.HTTPError as exc:  # pragma: no cover - runtime smoke script
        content = exc.read()
        status = exc.code

    if status not in expected:
        body_text = content.decode("utf-8", errors="ignore")
        raise RuntimeError(f"{method} {path} -> {status}, expected {expected}: {body_text}")
    return status, content


def main() -> None:
    for endpoint in ["/", "/health", "/ready", "/docs", "/metrics"]:
        request(endpoint)

    for endpoint in [
        f"{API_PREFIX}/teachers",
        f"{API_PREFIX}/writing-practice/exercises",
        f"{API_PREFIX}/news-articles/articles",
    ]:
        request(endpoint)

    suffix = uuid4().hex[:10]
    email = f"deploy-smoke-{suffix}@zabanyar.dev"
    password = "StrongPass123!"

    request(
        f"{API_PREFIX}/identity/auth/register",
        method="POST",
        body={
            "email": email,
            "password": password,
            "first_name": "Smoke",
            "last_name": "Check",
            "role": "student",
        },
        expected=(201,),
    )
    # Unconfirmed accounts are refused when email confirmation is enabled.
    status, content = request(
        f"{API_PREFIX}/identity/auth/login",
        method="POST",
        body={"email": email, "password": password},
        expected=(200, 403),
    )
    if status == 200:
        tokens = json.loads(content.decode("utf-8"))
        request(
            f"{API_PREFIX}/identity/users/me",
            headers={"Authorization": f"Bearer {tokens['access_token']}"},
        )

    print("Smoke checks passed.")


if __name__ == "__main__":
    main()
