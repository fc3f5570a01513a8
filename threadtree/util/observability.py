"""Logfire setup for the thread service.

Service operations open ``thread_service.<op>`` spans and emit events with
comment ids and counts, for example::

    with logfire.span("thread_service.delete", comment_id=comment_id):
        ...
    logfire.info("Comment deleted", comment_id=comment_id, removed=3)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from threadtree.config import ObservabilitySettings, Settings

SERVICE_NAME = "threadtree"
SERVICE_VERSION = "0.1.0"


def _cloud_enabled(observability: ObservabilitySettings) -> bool:
    """An explicit flag wins; otherwise a token turns cloud sending on."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Console output is always on. Set OBSERVABILITY__LOGFIRE_TOKEN to ship
    telemetry to Logfire, or OBSERVABILITY__SEND_TO_LOGFIRE to force it.
    """
    send_to_logfire = _cloud_enabled(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``."""
    logfire.instrument_fastapi(app)
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the statements the SQL blob store issues."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented", dialect=engine.dialect.name)
