from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Request, Security, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from pydantic import BaseModel

from iban_guard import (
    IbanDetector,
    InvalidShapeError,
    Specification,
    UnknownCountryError,
    available_countries,
    electronic_format,
    from_bban,
    get_country,
    is_valid,
    is_valid_bban,
    print_format,
    to_bban,
)

logger = logging.getLogger(__name__)

# ── Auth / API key ───────────────────────────────────────────────────────────

_API_KEY = os.getenv("API_KEY")
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(key: Annotated[str | None, Security(_api_key_header)]) -> None:
    if not _API_KEY:
        return  # Auth disabled: no env var configured
    if key == _API_KEY:
        return
    logger.warning("Rejected request with %s API key", "invalid" if key else "missing")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


# ── Pydantic models ──────────────────────────────────────────────────────────


class CountryOut(BaseModel):
    country_code: str
    length: int
    bban_length: int
    structure: str
    example: str


class IbanRequest(BaseModel):
    iban: str


class ValidateResponse(BaseModel):
    iban: str
    valid: bool
    country_code: str


class FormatRequest(BaseModel):
    iban: str
    separator: str = " "


class FormatResponse(BaseModel):
    electronic: str
    print: str


class ToBbanRequest(BaseModel):
    iban: str
    separator: str = " "


class ToBbanResponse(BaseModel):
    bban: str


class BbanRequest(BaseModel):
    country_code: str
    bban: str


class FromBbanResponse(BaseModel):
    iban: str


class BbanValidateResponse(BaseModel):
    valid: bool


class DetectRequest(BaseModel):
    text: str


class FindingOut(BaseModel):
    start: int
    end: int
    text: str
    iban: str
    country_code: str
    confidence: float


class DetectResponse(BaseModel):
    findings: list[FindingOut]


def _country_out(spec: Specification) -> CountryOut:
    return CountryOut(
        country_code=spec.country_code,
        length=spec.length,
        bban_length=spec.bban_length,
        structure=spec.structure,
        example=spec.example,
    )


# ── Detector (stateless, shared by all requests) ─────────────────────────────

_detector = IbanDetector()


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info(
        "iban-guard ready: %d countries, API key %s",
        len(available_countries()),
        "required" if _API_KEY else "disabled",
    )
    yield
    logger.info("iban-guard shutting down")


# ── FastAPI app ──────────────────────────────────────────────────────────────

app = FastAPI(title="iban-guard", lifespan=lifespan)

_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UnknownCountryError)
async def unknown_country_handler(_: Request, exc: UnknownCountryError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(InvalidShapeError)
async def invalid_shape_handler(_: Request, exc: InvalidShapeError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


# ── Routes ───────────────────────────────────────────────────────────────────


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.get(
    "/countries",
    response_model=list[CountryOut],
    dependencies=[Depends(verify_api_key)],
)
async def countries() -> list[CountryOut]:
    return [_country_out(spec) for spec in available_countries().values()]


@app.get(
    "/countries/{country_code}",
    response_model=CountryOut,
    dependencies=[Depends(verify_api_key)],
)
async def country(country_code: str) -> CountryOut:
    return _country_out(get_country(country_code.upper()))


@app.post("/validate", response_model=ValidateResponse, dependencies=[Depends(verify_api_key)])
async def validate(request: IbanRequest) -> ValidateResponse:
    electronic = electronic_format(request.iban)
    return ValidateResponse(
        iban=electronic,
        valid=is_valid(electronic),
        country_code=electronic[:2],
    )


@app.post("/format", response_model=FormatResponse, dependencies=[Depends(verify_api_key)])
async def format_iban(request: FormatRequest) -> FormatResponse:
    return FormatResponse(
        electronic=electronic_format(request.iban),
        print=print_format(request.iban, request.separator),
    )


@app.post("/bban", response_model=ToBbanResponse, dependencies=[Depends(verify_api_key)])
async def bban(request: ToBbanRequest) -> ToBbanResponse:
    return ToBbanResponse(bban=to_bban(request.iban, request.separator))


@app.post("/iban", response_model=FromBbanResponse, dependencies=[Depends(verify_api_key)])
async def iban(request: BbanRequest) -> FromBbanResponse:
    return FromBbanResponse(iban=from_bban(request.country_code, request.bban))


@app.post(
    "/bban/validate",
    response_model=BbanValidateResponse,
    dependencies=[Depends(verify_api_key)],
)
async def bban_validate(request: BbanRequest) -> BbanValidateResponse:
    return BbanValidateResponse(valid=is_valid_bban(request.country_code, request.bban))


@app.post("/detect", response_model=DetectResponse, dependencies=[Depends(verify_api_key)])
async def detect(request: DetectRequest) -> DetectResponse:
    findings = [
        FindingOut(
            start=f.start,
            end=f.end,
            text=f.text,
            iban=f.iban,
            country_code=f.country_code,
            confidence=f.confidence,
        )
        for f in _detector.detect(request.text)
    ]
    return DetectResponse(findings=findings)
