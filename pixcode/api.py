"""FastAPI application exposing the Pix code generator."""
from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse, Response

from .config import settings
from .errors import PixError
from .logging_conf import configure_logging
from .middleware import RequestLoggingMiddleware, route_path
from .monitoring import metrics_payload, record_service_error
from .schemas import ErrorResponse, PixQRRequest, PixQRResponse, PixRequest, PixResponse, QRCodeRequest
from .services.generator import PixCodeService

app = FastAPI(title="pixcode", version="0.1.0")
app.add_middleware(RequestLoggingMiddleware)

logger = logging.getLogger("pixcode.api")

ENCODE_ERRORS: dict[int | str, dict] = {
    422: {"model": ErrorResponse, "description": "Request failed validation"},
    500: {"model": ErrorResponse, "description": "Payload could not be encoded"},
}
RENDER_ERRORS: dict[int | str, dict] = {
    413: {"model": ErrorResponse, "description": "Content exceeds QR code capacity"},
}


def _warn_insecure_defaults() -> None:
    if settings.api_key == "dev-secret-key":
        logger.warning("api key is using its default value", extra={"config_key": "api_key"})


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    _warn_insecure_defaults()


async def require_api_key(x_api_key: str = Header(...)) -> None:
    if x_api_key != settings.api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


def get_service() -> PixCodeService:
    return PixCodeService()


@app.exception_handler(PixError)
async def pix_error_handler(request: Request, exc: PixError) -> JSONResponse:
    path = route_path(request)
    logger.warning("pix error", extra={"code": exc.code, "path": path, "method": request.method})
    record_service_error(exc.code, path)
    return JSONResponse(status_code=exc.status_code, content={"code": exc.code, "message": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled exception", extra={"path": route_path(request), "method": request.method})
    return JSONResponse(status_code=500, content={"code": "ERR_INTERNAL", "message": "Internal server error"})


@app.get("/health", tags=["system"])
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metrics", tags=["system"])
async def metrics() -> Response:
    payload, content_type = metrics_payload()
    return Response(content=payload, media_type=content_type)


@app.post(
    "/v1/pix",
    response_model=PixResponse,
    responses=ENCODE_ERRORS,
    tags=["pix"],
    dependencies=[Depends(require_api_key)],
)
async def create_pix(payload: PixRequest, service: PixCodeService = Depends(get_service)) -> PixResponse:
    encoded = service.encode(payload.to_encoding_request())
    return PixResponse(payload=encoded.payload, crc=encoded.crc)


@app.post(
    "/v1/pix/qr",
    response_model=PixQRResponse,
    responses={**ENCODE_ERRORS, **RENDER_ERRORS},
    tags=["pix"],
    dependencies=[Depends(require_api_key)],
)
async def create_pix_qr(payload: PixQRRequest, service: PixCodeService = Depends(get_service)) -> PixQRResponse:
    result = service.generate(payload.to_encoding_request(), qr_size=payload.size)
    return PixQRResponse(
        payload=result.encoded.payload,
        crc=result.encoded.crc,
        qr_png_base64=result.qr_png_base64,
    )


@app.post(
    "/v1/qrcode",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}, **RENDER_ERRORS},
    tags=["qr"],
    dependencies=[Depends(require_api_key)],
)
async def create_qrcode(payload: QRCodeRequest, service: PixCodeService = Depends(get_service)) -> Response:
    png_bytes = service.render(payload.content, size=payload.size)
    return Response(content=png_bytes, media_type="image/png")
