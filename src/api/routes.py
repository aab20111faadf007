"""
Document Intelligence API Routes.

Endpoints:
    POST {route_prefix}/analyze   Analyze an uploaded PDF, JPG or PNG invoice
    GET  /health                  Liveness check
"""

import json
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse

from config import get_config
from src.analyzer import InvoiceAnalyzer
from src.utils.logger import get_logger
from src.utils.helpers import format_file_size
from src.utils.exceptions import (
    DocumentIntelligenceError,
    ErrorCode,
    FileEmptyError,
    InputError,
    InvalidFileTypeError,
)
from .schemas import ErrorResponse, HealthResponse, SuccessResponse, build_success_response

logger = get_logger(__name__)

DEFAULT_ALLOWED_CONTENT_TYPES = ["application/pdf", "image/jpeg", "image/png"]

router = APIRouter(tags=["DocumentIntelligence"])
health_router = APIRouter(tags=["Health"])


def ensure_analyzer(app: FastAPI) -> InvoiceAnalyzer:
    """
    Return the analyzer stored on the application, creating it on first use.

    Whoever creates it, the analyzer lives on ``app.state`` and is released
    by close_analyzer.
    """
    analyzer = getattr(app.state, "analyzer", None)
    if analyzer is None:
        analyzer = InvoiceAnalyzer()
        app.state.analyzer = analyzer
    return analyzer


async def close_analyzer(app: FastAPI) -> None:
    """Close the application's analyzer and its service session, if any."""
    analyzer = getattr(app.state, "analyzer", None)
    if analyzer is not None:
        app.state.analyzer = None
        await analyzer.close()


def get_analyzer(request: Request) -> InvoiceAnalyzer:
    """
    Dependency returning the application's analyzer.

    Applications built by create_app close it on shutdown. An application
    that mounts this router itself must await close_analyzer when it stops.
    """
    return ensure_analyzer(request.app)


def allowed_content_types() -> List[str]:
    return [t.lower() for t in get_config("api.allowed_content_types", DEFAULT_ALLOWED_CONTENT_TYPES)]


async def read_upload(file: Optional[UploadFile]) -> bytes:
    """
    Read and validate an uploaded document.

    Raises:
        FileEmptyError: If nothing or an empty file was uploaded.
        InvalidFileTypeError: If the content type is not accepted.
    """
    if file is None:
        raise FileEmptyError()

    content = await file.read()
    if not content:
        raise FileEmptyError(file.filename)

    allowed = allowed_content_types()
    if (file.content_type or "").lower() not in allowed:
        raise InvalidFileTypeError(file.content_type, allowed)

    logger.info(
        f"Received {file.filename} ({file.content_type}, {format_file_size(len(content))})"
    )
    return content


def error_response(error: DocumentIntelligenceError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_response())


@router.post(
    "/analyze",
    response_model=SuccessResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid file uploaded or no file uploaded"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Analyze an uploaded document",
    description="Analyzes an uploaded PDF, JPG, or PNG document and extracts relevant invoice data.",
)
async def analyze(
    file: Optional[UploadFile] = File(None),
    analyzer: InvoiceAnalyzer = Depends(get_analyzer),
):
    filename = file.filename if file is not None else None

    try:
        content = await read_upload(file)
        result = await analyzer.analyze(content)

    except InputError as e:
        logger.warning(f"Rejected upload: {e}")
        return error_response(e)

    except DocumentIntelligenceError as e:
        logger.error(f"Error analyzing invoice for file {filename}: {e}", exc_info=True)
        return error_response(e)

    except Exception as e:
        logger.error(f"Error analyzing invoice for file {filename}: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"Error": "Internal server error.", "ErrorCode": ErrorCode.UNKNOWN_ERROR},
        )

    invoice_data = result.to_dict()
    logger.info(f"Invoice Data: {json.dumps(invoice_data, indent=2)}")

    return build_success_response(invoice_data)


@health_router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse()
