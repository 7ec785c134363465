"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.responses import HTMLResponse
from sqlalchemy import text

from zabanyar.core.config import get_settings
from zabanyar.core.database import SessionLocal, close_engine
from zabanyar.core.metrics import build_metrics_response, instrument_http_request
from zabanyar.core.rate_limit import get_rate_limiter
from zabanyar.modules.admin.router import router as admin_router
from zabanyar.modules.avatars.router import router as avatars_router
from zabanyar.modules.billing.router import router as billing_router
from zabanyar.modules.booking.router import router as booking_router
from zabanyar.modules.classes.router import router as classes_router
from zabanyar.modules.dashboard.router import router as dashboard_router
from zabanyar.modules.identity.repository import IdentityRepository
from zabanyar.modules.identity.router import router as identity_router
from zabanyar.modules.identity.service import IdentityService
from zabanyar.modules.listening_practice.router import router as listening_practice_router
from zabanyar.modules.news_articles.router import router as news_articles_router
from zabanyar.modules.notifications.router import router as notifications_router
from zabanyar.modules.registration.router import router as registration_router
from zabanyar.modules.scheduling.router import router as scheduling_router
from zabanyar.modules.students.router import router as students_router
from zabanyar.modules.teachers.router import router as teachers_router
from zabanyar.modules.writing_practice.router import router as writing_practice_router
from zabanyar.shared.exceptions import register_exception_handlers
from zabanyar.shared.utils import utc_now

settings = get_settings()
logger = logging.getLogger(__name__)


def _landing_page_html() -> str:
    """Build minimal landing page for root path."""
    return f"""
<!doctype html>
<html lang="fa" dir="rtl">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{settings.app_name} API</title>
    <style>
      body {{
        margin: 0;
        font-family: Vazirmatn, Tahoma, Arial, sans-serif;
        background: linear-gradient(135deg, #f5f3ff 0%, #eef6f4 100%);
        color: #1f2937;
      }}
      .container {{
        max-width: 860px;
        margin: 48px auto;
        padding: 0 20px;
      }}
      .hero {{
        background: #ffffff;
        border-radius: 16px;
        border: 1px solid #e0e3f0;
        box-shadow: 0 10px 28px rgba(31, 41, 55, 0.08);
        padding: 28px;
      }}
      h1 {{
        margin: 0 0 12px;
        font-size: 2rem;
      }}
      .links {{
        margin-top: 22px;
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(180px, 1fr));
        gap: 10px;
      }}
      a {{
        display: block;
        text-decoration: none;
        border-radius: 10px;
        border: 1px solid #cfd3e6;
        background: #fafaff;
        color: #312e81;
        padding: 10px 12px;
      }}
      code {{
        display: inline-block;
        margin-top: 10px;
        font-size: 0.9rem;
        background: #f1f2f6;
        border-radius: 6px;
        padding: 4px 6px;
        direction: ltr;
      }}
    </style>
  </head>
  <body>
    <main class="container">
      <section class="hero">
        <h1>{settings.app_name} API</h1>
        <p>سرویس بک‌اند زبان‌یار در حال اجراست. برای مستندات و بررسی وضعیت از پیوندهای زیر استفاده کنید.</p>
        <div class="links">
          <a href="/docs">مستندات API</a>
          <a href="/health">بررسی سلامت</a>
          <a href="/ready">بررسی آمادگی</a>
          <a href="/metrics">متریک‌ها</a>
        </div>
        <code>API prefix: {settings.api_prefix}</code>
      </section>
    </main>
  </body>
</html>
"""


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Application startup and shutdown hooks."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("Starting %s", settings.app_name)

    async with SessionLocal() as session:
        try:
            service = IdentityService(IdentityRepository(session))
            await service.ensure_default_roles()
            await session.commit()
            logger.info("Default roles ensured")
        except Exception:
            await session.rollback()
            logger.exception("Failed during startup initialization")
            raise

    yield

    logger.info("Shutting down %s", settings.app_name)
    await close_engine()


app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    lifespan=lifespan,
)
app.middleware("http")(instrument_http_request)

register_exception_handlers(app)

for router in (
    identity_router,
    registration_router,
    teachers_router,
    students_router,
    scheduling_router,
    booking_router,
    billing_router,
    classes_router,
    dashboard_router,
    notifications_router,
    writing_practice_router,
    listening_practice_router,
    news_articles_router,
    avatars_router,
    admin_router,
):
    app.include_router(router, prefix=settings.api_prefix)


@app.get("/", include_in_schema=False, response_class=HTMLResponse)
async def landing_page() -> HTMLResponse:
    """Root page with quick navigation links."""
    return HTMLResponse(content=_landing_page_html())


@app.get("/health")
async def healthcheck() -> dict[str, str]:
    """Liveness check endpoint."""
    return {"status": "ok"}


async def _is_database_ready() -> bool:
    try:
        async with SessionLocal() as session:
            await session.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.exception("Database readiness check failed")
        return False


async def _is_rate_limiter_ready() -> bool:
    """The Redis limiter must answer a ping; the in-memory one always does."""
    try:
        return await get_rate_limiter().ping()
    except Exception:
        logger.exception("Rate limiter readiness check failed")
        return False


@app.get("/ready")
async def readiness_check() -> dict[str, str]:
    """Readiness check: database and auth rate-limit backend."""
    checks = {
        "database": await _is_database_ready(),
        "rate_limiter": await _is_rate_limiter_ready(),
    }
    failing = [name for name, ok in checks.items() if not ok]
    if failing:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Not ready: {', '.join(failing)}",
        )
    return {
        "status": "ready",
        **{name: "ok" for name in checks},
        "rate_limit_backend": settings.auth_rate_limit_backend,
        "timestamp": utc_now().isoformat(),
    }


@app.get("/metrics", include_in_schema=False)
async def metrics_endpoint(_: Request) -> Response:
    """Prometheus metrics endpoint."""
    return build_metrics_response()
