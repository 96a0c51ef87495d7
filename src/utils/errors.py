from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)

class ApiError(HTTPException):
    def __init__(self, status_code: int, message):
        super().__init__(status_code=status_code, detail=message)

async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": True, "message": exc.detail, "status_code": exc.status_code},
        headers=getattr(exc, "headers", None)
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    logger.warning(f"Rejected request to {request.url.path}: {messages}")
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder({"error": True, "message": messages, "status_code": 422})
    )
