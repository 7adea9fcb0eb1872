"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mezzanine.application import AccessoryNotFoundError, AccessoryRejectedError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(AccessoryRejectedError)
    async def rejected_handler(
        request: Request, exc: AccessoryRejectedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "error": exc.reason,
                "error_type": exc.code,
                "details": {
                    "available": exc.available,
                    "requested": exc.requested,
                    "deficit": exc.deficit,
                },
            },
        )

    @app.exception_handler(AccessoryNotFoundError)
    async def not_found_handler(
        request: Request, exc: AccessoryNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"id": exc.accessory_id},
            },
        )
