from __future__ import annotations

import time
from typing import Any

from fastapi import FastAPI, HTTPException, Request, Response

from .assembler import OutputContractError
from .config import Settings
from .crypto import load_signer_from_env
from .logging_config import get_logger
from .pipeline import BookingNormalizer
from .shapes import BookingPayloadError
from .tokens import verify_webhook_secret
from .utils import canonical_json, sha256_cid

app = FastAPI(title="Booking Check-in Gateway", version="0.1.0")

_req_logger = get_logger("booking.requests", level_env="BOOKING_REQUEST_LOG_LEVEL")

@app.middleware("http")
async def _logging_middleware(request: Request, call_next):  # pragma: no cover - thin instrumentation
    start = time.perf_counter()
    try:
        response = await call_next(request)
        duration = (time.perf_counter() - start) * 1000.0
        _req_logger.info(f"method={request.method} path={request.url.path} status={response.status_code} dur_ms={duration:.2f}")
        return response
    except Exception as e:
        duration = (time.perf_counter() - start) * 1000.0
        _req_logger.error(f"method={request.method} path={request.url.path} error={e} dur_ms={duration:.2f}")
        raise

settings = Settings.from_env()
normalizer = BookingNormalizer(settings)
signer = load_signer_from_env()


async def _read_payload(request: Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except Exception:
        raise HTTPException(status_code=400, detail="Body must be valid JSON")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Body must be a JSON object")
    return body


def _normalize(payload: dict[str, Any], headers: dict[str, str], response: Response) -> dict[str, Any]:
    try:
        record = normalizer.normalize(payload, headers)
    except BookingPayloadError as e:
        _req_logger.warning(f"rejected payload: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except OutputContractError:
        _req_logger.exception("booking record failed output contract")
        raise

    record_cid = sha256_cid(canonical_json(record))
    response.headers["X-Record-CID"] = record_cid
    response.headers["X-Idempotency-Key"] = record["idempotencyKey"]
    if signer:
        response.headers["X-Record-Signature"] = signer.sign_record(record_cid, record["idempotencyKey"])
        response.headers["X-Record-KID"] = signer.kid
    return record


@app.get("/healthz")
@app.get("/health")
def healthz():
    return {
        "ok": True,
        "signer": bool(signer),
        "version": app.version,
    }

@app.get("/.well-known/jwks.json")
def jwks():
    return {"keys": [signer.public_jwk()] if signer else []}

@app.post("/v1/bookings/webhook")
async def booking_webhook(request: Request, response: Response):
    headers = {k.lower(): v for k, v in request.headers.items()}
    received = headers.get(settings.webhook_secret_header)
    if not verify_webhook_secret(received, settings.webhook_secret):
        _req_logger.warning("webhook secret mismatch")
        raise HTTPException(status_code=401, detail="Invalid webhook secret")
    payload = await _read_payload(request)
    return _normalize(payload, headers, response)

@app.post("/v1/bookings/normalize")
async def booking_normalize(request: Request, response: Response):
    payload = await _read_payload(request)
    return _normalize(payload, {k.lower(): v for k, v in request.headers.items()}, response)
