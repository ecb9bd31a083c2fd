"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tabletops.application.config import ConfigError
from tabletops.domain.exceptions import NoOutlineFoundError, UnsupportedFileTypeError


class UnknownMaterialError(Exception):
    """Raised when an event names a material missing from the catalogue."""

    def __init__(self, material_id: str, available: list[str]) -> None:
        self.material_id = material_id
        self.available = available
        super().__init__(f"Unknown catalogue material: {material_id}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(UnsupportedFileTypeError)
    async def unsupported_file_type_handler(
        request: Request, exc: UnsupportedFileTypeError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": {"extension": exc.extension, "accepted": list(exc.accepted)},
            },
        )

    @app.exception_handler(NoOutlineFoundError)
    async def no_outline_handler(
        request: Request, exc: NoOutlineFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": {"file_name": exc.file_name},
            },
        )

    @app.exception_handler(UnknownMaterialError)
    async def unknown_material_handler(
        request: Request, exc: UnknownMaterialError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "unknown_material",
                "details": {"material_id": exc.material_id, "available": exc.available},
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )
