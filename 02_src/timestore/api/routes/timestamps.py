"""Timestamp API routes."""

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from ...app import IApplication
from ...errors import ApplicationNotStartedError, DecodeError, StoreError
from ...logging_config import get_logger
from ..codecs import WireFormat, decode, encode_json, encode_text

logger = get_logger(__name__)


def create_time_router(app: IApplication, wire_format: WireFormat) -> APIRouter:
    """Create the setTime/getTime router for one wire format."""
    router = APIRouter(tags=["time"])

    @router.post("/setTime")
    async def set_time(request: Request) -> Response:
        """Store the timestamp carried by the request body."""
        body = await request.body()
        try:
            timestamp = decode(body, wire_format)
        except DecodeError as e:
            logger.warning("Rejected setTime body: %s", e)
            raise HTTPException(status_code=400, detail=str(e))

        logger.info("Handling setTime request: New time value: %s", timestamp)
        try:
            await app.store.set(timestamp)
        except (StoreError, ApplicationNotStartedError) as e:
            logger.error("setTime failed: %s", e)
            raise HTTPException(status_code=500, detail=str(e))

        return Response(status_code=200)

    @router.get("/getTime")
    async def get_time() -> Response:
        """Return the stored timestamp."""
        logger.info("Handling getTime request")
        try:
            timestamp = await app.store.get()
        except (StoreError, ApplicationNotStartedError) as e:
            logger.error("getTime failed: %s", e)
            raise HTTPException(status_code=500, detail=str(e))

        if wire_format is WireFormat.JSON:
            return JSONResponse(encode_json(timestamp).model_dump(mode="json"))
        return PlainTextResponse(encode_text(timestamp))

    return router
