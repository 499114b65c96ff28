"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..app import Application
from ..config import resolve_wire_format
from .codecs import WireFormat
from .routes import create_time_router


async def plain_text_http_error(request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render HTTP errors as plain text carrying the error message."""
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_fastapi_app(
    application: Application | None = None,
    wire_format: WireFormat | str | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application around one Application."""
    application = application if application is not None else Application()
    if not isinstance(wire_format, WireFormat):
        wire_format = WireFormat(resolve_wire_format(wire_format))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        # Startup
        await application.start()
        yield
        # Shutdown
        await application.stop()

    fastapi_app = FastAPI(
        title="Timestore API",
        description="In-memory timestamp store",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.state.application = application
    fastapi_app.state.wire_format = wire_format

    fastapi_app.add_exception_handler(StarletteHTTPException, plain_text_http_error)
    fastapi_app.include_router(create_time_router(application, wire_format))

    return fastapi_app
