"""FastAPI web service exposing the APRS position decoders.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Endpoints:
    POST /decode    decode an information field (and Mic-E destination call)
    GET  /distance  great-circle distance and bearing between two points

The payload is sent as a JSON string and converted to bytes with latin-1,
so every byte value 0x00-0xff can be expressed (Mic-E uses 0x1c-0x7f).
An optional ``nmea_checksum`` field (ignore, optional or required) sets how
strictly raw NMEA sentences must carry their ``*hh`` checksum.
"""

import logging

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from aprsposition import ChecksumPolicy, Position, dist_from, try_decode_position
from server.formatters import format_fault_message, format_position_message

logger = logging.getLogger(__name__)

_UNPROCESSABLE = 422


class DecodeRequest(BaseModel):
    payload: str
    destination: str | None = None
    nmea_checksum: ChecksumPolicy = ChecksumPolicy.IGNORE


app = FastAPI(title="APRS position decoder")


@app.post("/decode")
def decode(request: DecodeRequest) -> JSONResponse:
    """Decode the position carried by an APRS information field.

    Returns ``{"ok": true, "position": {...}}`` on success, or status 422
    with ``{"ok": false, "fault": "<cause>"}`` when the decoders reject it.
    """
    try:
        payload = request.payload.encode("latin-1")
    except UnicodeEncodeError:
        return JSONResponse(
            status_code=_UNPROCESSABLE,
            content=format_fault_message("Payload is not 8-bit text"),
        )

    result = try_decode_position(payload, request.destination, request.nmea_checksum)
    if result.has_fault:
        logger.info("Rejected payload %r: %s", request.payload, result.fault)
        return JSONResponse(
            status_code=_UNPROCESSABLE,
            content=format_fault_message(result.fault),
        )
    return JSONResponse(content=format_position_message(result.position))


@app.get("/distance")
def distance(
    lat1: float = Query(ge=-90, le=90, allow_inf_nan=False),
    lon1: float = Query(ge=-180, le=180, allow_inf_nan=False),
    lat2: float = Query(ge=-90, le=90, allow_inf_nan=False),
    lon2: float = Query(ge=-180, le=180, allow_inf_nan=False),
) -> dict:
    """Distance in statute miles and initial bearing from point 1 to point 2.

    Out-of-range or non-finite coordinates are rejected with status 422.
    """
    start = Position(lat1, lon1)
    end = Position(lat2, lon2)
    return {
        "miles": dist_from(start.latitude, start.longitude, end.latitude, end.longitude),
        "bearing": end.direction(start),
    }
