"""Logfire setup for the forum API.

Use cases and services emit through ``logfire`` directly:

    with logfire.span("toggle_like", comment_id=comment_id, user_id=user_id):
        ...
    logfire.info("Comment deleted", thread_id=thread_id, comment_id=comment_id)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import Settings

SERVICE_NAME = "forum-api"
SERVICE_VERSION = "0.1.0"

# Resource identifiers worth lifting from the URL onto request spans
_TRACED_PATH_PARAMS = ("thread_id", "comment_id", "reply_id")


def _should_send(settings: Settings) -> bool:
    # An explicit flag wins; otherwise a token alone enables cloud export
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is built.

    Without ``OBSERVABILITY__LOGFIRE_TOKEN`` everything stays on the console.
    Bearer tokens are scrubbed from recorded attributes.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=["authorization", "bearer"]),
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
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, tagging spans with the thread/comment/reply in the URL.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        path_params = getattr(request, "path_params", None) or {}
        for name in _TRACED_PATH_PARAMS:
            if name in path_params:
                result[name] = path_params[name]
        if getattr(request, "client", None):
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
