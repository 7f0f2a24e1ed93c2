"""HTTP endpoint for device snapshots.

Serves the automation-server routes:

    GET /session/{session_id}/appium/device/info
    GET /session/{session_id}/appium/device/system_bars

Usage:
    devsnap serve --profile pixel7.yaml
"""

from __future__ import annotations

from collections.abc import Callable

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from devsnap import __version__
from devsnap.backends.base import DeviceContext
from devsnap.backends.profile import ProfileError
from devsnap.snapshot import (
    DeviceSnapshotBuilder,
    SnapshotError,
    SystemBarsReporter,
    build_response,
)
from devsnap.utils.logger import Logger

ContextFactory = Callable[[], DeviceContext]


def _error_response(session_id: str, error: Exception) -> JSONResponse:
    Logger.emit("server", "ERROR", f"Request failed for session {session_id}: {error}")
    return JSONResponse(
        status_code=500,
        content=build_response(
            session_id, {"error": "unknown error", "message": str(error)}
        ),
    )


def create_app(context_factory: ContextFactory) -> FastAPI:
    """Create the FastAPI app.

    Every failure, including a profile that can no longer be loaded, is
    returned as a 500 session envelope.

    Args:
        context_factory: Called once per request to build fresh collaborators,
            so requests never share mutable state.

    Returns
    -------
        Configured FastAPI application.
    """
    app = FastAPI(title="devsnap", version=__version__)

    @app.get("/session/{session_id}/appium/device/info")
    def get_device_info(session_id: str) -> JSONResponse:
        try:
            body = DeviceSnapshotBuilder(context_factory()).to_dict()
        except (SnapshotError, ProfileError) as e:
            return _error_response(session_id, e)
        except Exception as e:
            Logger.emit("server", "DEBUG", f"Unexpected {type(e).__name__}")
            return _error_response(session_id, e)
        return JSONResponse(build_response(session_id, body))

    @app.get("/session/{session_id}/appium/device/system_bars")
    def get_system_bars(session_id: str) -> JSONResponse:
        try:
            body = SystemBarsReporter(context_factory()).build().to_dict()
        except (SnapshotError, ProfileError) as e:
            return _error_response(session_id, e)
        except Exception as e:
            Logger.emit("server", "DEBUG", f"Unexpected {type(e).__name__}")
            return _error_response(session_id, e)
        return JSONResponse(build_response(session_id, body))

    return app
