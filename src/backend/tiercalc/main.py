"""Tier calculator FastAPI application.

Entry point: uvicorn tiercalc.main:app
The same core functions back the `tiercalc` command (tiercalc.cli).
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tiercalc.config import settings
from tiercalc.errors import TierCalcError
from tiercalc.middleware import RequestIDMiddleware, get_request_id
from tiercalc.routers import calculator, health

log = logging.getLogger(__name__)

app = FastAPI(title=settings.API_TITLE)

app.add_middleware(RequestIDMiddleware)


@app.exception_handler(TierCalcError)
async def tiercalc_error_handler(request: Request, exc: TierCalcError) -> JSONResponse:
    request_id = get_request_id()
    log.info(
        "%s %s rejected with %s: %s [%s]",
        request.method,
        request.url.path,
        exc.code,
        exc.message,
        request_id,
    )
    error = {"code": exc.code, "message": exc.message, "request_id": request_id}
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error},
        headers={"X-Request-ID": request_id},
    )


app.include_router(health.router)
app.include_router(calculator.router)
