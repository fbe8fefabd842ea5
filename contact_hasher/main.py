import logging

from fastapi import FastAPI, UploadFile, File, HTTPException
from fastapi.responses import Response

from .batch import decode_csv_bytes, export_csv, process_batch
from .config import Config, configure_logging
from .errors import BatchLimitExceeded, BatchProcessingError
from .models import BatchResponse, ErrorResponse, HashResponse, HealthResponse, ProcessedData, ProcessorState, ValueRequest
from .processors import process_email, process_phone
from .rules import EXPORT_FILENAME

configure_logging()
logger = logging.getLogger(__name__)
logger.info("Starting contact-hasher (environment: %s)", Config.ENVIRONMENT)

app = FastAPI(
    title="contact-hasher",
    description="Email and phone normalization with SHA-256 / Base64 hashing",
    version="0.1.0",
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}


def _hash_response(state: ProcessorState) -> HashResponse:
    if state.error:
        raise HTTPException(status_code=422, detail=state.error)

    return HashResponse(
        input=state.input,
        normalized_value=state.result.normalized_value,
        sha256_hash=state.result.sha256_hash,
        base64_hash=state.result.base64_hash,
    )


async def _process_upload(file: UploadFile) -> ProcessedData:
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Please upload a CSV file")

    # One byte past the limit is enough to know the upload is too large.
    raw = await file.read(Config.MAX_UPLOAD_BYTES + 1)
    if len(raw) > Config.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File exceeds maximum upload size of {Config.MAX_UPLOAD_BYTES} bytes")

    try:
        return process_batch(decode_csv_bytes(raw))
    except BatchLimitExceeded as e:
        raise HTTPException(status_code=413, detail=str(e))
    except BatchProcessingError as e:
        logger.error("Batch failed for %s: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/email", response_model=HashResponse, responses=ERROR_RESPONSES)
def hash_email(request: ValueRequest):
    return _hash_response(process_email(ProcessorState(input=request.value)))


@app.post("/phone", response_model=HashResponse, responses=ERROR_RESPONSES)
def hash_phone(request: ValueRequest):
    return _hash_response(process_phone(ProcessorState(input=request.value)))


@app.post("/batch", response_model=BatchResponse, responses=ERROR_RESPONSES)
async def batch(file: UploadFile = File(...)):
    data = await _process_upload(file)
    return BatchResponse(
        filename=file.filename,
        headers=data.headers,
        rows=data.rows,
        skipped_rows=data.skipped_rows,
        processed_rows=len(data.rows),
    )


@app.post("/batch/export", responses=ERROR_RESPONSES)
async def batch_export(file: UploadFile = File(...)):
    data = await _process_upload(file)
    return Response(
        content=export_csv(data),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
