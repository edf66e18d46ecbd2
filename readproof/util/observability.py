"""Observability configuration using Logfire.

Domain services open one span per operation (``vote_service.cast_vote``) and
emit structured events keyed by wallet identity and comment/thread ids:

    logfire.info("Vote cast", comment_id=str(comment_id), voter=voter.root)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from readproof.config import ObservabilitySettings, Settings

# Polled by load balancers; tracing it only adds noise
UNTRACED_URLS = "/health"


def _send_to_logfire(observability: ObservabilitySettings) -> bool:
    # Explicit setting wins, otherwise send whenever a token is configured
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship spans to Logfire cloud;
    OBSERVABILITY__SEND_TO_LOGFIRE overrides the choice either way. Without
    a token everything stays on the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = _send_to_logfire(observability)

    logfire.configure(
        service_name="readproof-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
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
        freshness_window_seconds=settings.signing.freshness_window_seconds,
        strict_payload=settings.protocol.strict_payload,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health checks."""

    def _request_attributes(request, attributes):
        result = {**attributes, "path": request.url.path}
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL, including the row locks and counter updates behind votes.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
