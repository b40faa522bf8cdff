"""FastAPI application for the BunkApp attendance calculator."""

import logging
import traceback

from fastapi import Depends, FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bunkapp.attendance import bunkable, evaluate, percentage, required
from bunkapp.config import get_settings
from bunkapp.display import build_result_view
from bunkapp.exceptions import StorageError
from bunkapp.logging_setup import setup_logging
from bunkapp.models import (
    AttendanceInput,
    EvaluationResult,
    HelperValue,
    ResultView,
    ShareTextResponse,
    StoredInputs,
)
from bunkapp.share_text import generate_share_text
from bunkapp.storage import InputStore

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="1.0.0")

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler_json(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions and return JSON."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler_json(request: Request, exc: RequestValidationError):
    """Handle validation errors and return JSON."""
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors())}
    )


@app.exception_handler(StorageError)
async def storage_exception_handler_json(request: Request, exc: StorageError):
    """Handle failures writing the input snapshot."""
    logger.error("Storage failure: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"detail": exc.message, "type": type(exc).__name__}
    )


# Catches whatever the specific handlers above do not
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions and return JSON."""
    logger.exception("Unhandled error on %s", request.url.path)
    error_detail = str(exc)
    if settings.debug:
        error_detail = f"{str(exc)}\n\n{traceback.format_exc()}"

    return JSONResponse(
        status_code=500,
        content={
            "detail": f"Internal server error: {error_detail}",
            "type": type(exc).__name__
        }
    )


def get_store() -> InputStore:
    """Input store backed by the configured storage path."""
    return InputStore(settings.storage_path, default_criteria=settings.default_criteria)


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve a minimal landing page."""
    return HTMLResponse(
        content=f"<h1>{settings.app_name}</h1><p>{settings.app_tagline}</p>"
                "<p>POST your lecture counts to <code>/evaluate</code>.</p>"
    )


@app.get("/health")
async def health_check():
    """Health check endpoint to test server connectivity."""
    return JSONResponse(content={"status": "ok", "message": "Server is running"})


@app.post("/evaluate", response_model=EvaluationResult)
async def evaluate_endpoint(data: AttendanceInput):
    """Evaluate attendance against the criteria."""
    result = evaluate(data)
    logger.debug(
        "Evaluated %s/%s at %s%%: %s",
        data.attended_lectures, data.total_lectures, data.attendance_criteria, result.status.value
    )
    return result


@app.post("/result-view", response_model=ResultView)
async def result_view_endpoint(data: AttendanceInput):
    """Evaluate and map the result to display labels and colours."""
    return build_result_view(evaluate(data))


@app.post("/share-text", response_model=ShareTextResponse)
async def share_text_endpoint(data: AttendanceInput):
    """Generate the shareable text summary for an evaluation."""
    result = evaluate(data)
    return ShareTextResponse(
        text=generate_share_text(result, data, settings),
        result=result
    )


@app.get("/percentage", response_model=HelperValue)
async def percentage_endpoint(
    attended: float = Query(...),
    total: float = Query(...)
):
    """Current attendance percentage."""
    return HelperValue(value=percentage(attended, total))


@app.get("/bunkable", response_model=HelperValue)
async def bunkable_endpoint(
    attended: float = Query(...),
    total: float = Query(...),
    required_pct: float = Query(settings.default_criteria)
):
    """Lectures that can be missed while staying at the required percentage."""
    return HelperValue(value=bunkable(attended, total, required_pct))


@app.get("/required", response_model=HelperValue)
async def required_endpoint(
    attended: float = Query(...),
    total: float = Query(...),
    required_pct: float = Query(settings.default_criteria)
):
    """Lectures that must be attended to reach the required percentage."""
    return HelperValue(value=required(attended, total, required_pct))


@app.get("/inputs", response_model=StoredInputs)
def get_inputs(store: InputStore = Depends(get_store)):
    """Get the last saved form inputs."""
    return store.load()


@app.put("/inputs", response_model=StoredInputs)
def put_inputs(snapshot: StoredInputs, store: InputStore = Depends(get_store)):
    """Save the form inputs, replacing any previous snapshot."""
    return store.save(snapshot)


@app.get("/inputs/evaluate", response_model=EvaluationResult)
def evaluate_stored_inputs(store: InputStore = Depends(get_store)):
    """Evaluate the last saved form inputs."""
    return evaluate(store.load_input())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
