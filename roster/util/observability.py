"""Logfire setup for the roster API.

Services log through ``logfire`` directly and wrap each operation in a span
named ``<service>.<method>``, e.g. ``follow_service.follow``. This module
configures the exporter once per process and attaches the FastAPI and
SQLAlchemy integrations, so a request span contains the service span and
the SQL it issued.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from roster.config import Settings

# Path parameters copied onto request spans
TRACED_PATH_PARAMS = ("user_id", "target_id")


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the roster process.

    Export to Logfire cloud follows ``OBSERVABILITY__SEND_TO_LOGFIRE`` when
    set; otherwise it is on exactly when ``OBSERVABILITY__LOGFIRE_TOKEN`` is.
    Console output is always on, verbose in debug mode.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    config_kwargs = {
        "service_name": "roster-api",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if observability.logfire_token:
        config_kwargs["token"] = observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every roster HTTP request.

    Request spans carry the method, path and the user IDs from the path, so
    a failed follow can be found by either user.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes, "method": request.method, "path": request.url.path}
        for name in TRACED_PATH_PARAMS:
            if name in request.path_params:
                result[name] = request.path_params[name]
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the queries issued against the users and follows tables.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
