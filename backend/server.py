"""
Delayed square server.
Exposes HTTP API for the delayed square computation and the example snippets.
"""
from __future__ import annotations
import asyncio
import dataclasses
import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from compute import ComputationFailure, DelayedSquare, Outcome, get_settings
from run_examples import collect_examples

logging.basicConfig(level=get_settings().log_level)
log = logging.getLogger(__name__)


app = FastAPI(title="Delayed Square Server", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_square = DelayedSquare()


@app.get("/")
def root() -> dict:
    """Delayed Square API. Use /docs for Swagger or /health to check server."""
    return {"name": "Delayed Square Server", "docs": "/docs", "health": "/health"}


class SquareRequest(BaseModel):
    n: int


class BatchSquareRequest(BaseModel):
    values: list[int]


def _outcome_to_dict(n: int, outcome: Outcome) -> dict[str, Any]:
    return {"n": n, **outcome.to_dict()}


def _log_outcome(n: int, outcome: Outcome) -> None:
    if isinstance(outcome, ComputationFailure):
        log.warning("square(%d) failed: %s", n, outcome.message)
    else:
        log.info("square(%d) = %d", n, outcome.value)


@app.post("/square")
async def square(request: SquareRequest) -> dict:
    """Square n after the configured delay. Negative n is rejected with 400."""
    outcome = await _square.run(request.n)
    _log_outcome(request.n, outcome)
    if isinstance(outcome, ComputationFailure):
        raise HTTPException(status_code=400, detail=outcome.message)
    return _outcome_to_dict(request.n, outcome)


@app.post("/square/batch")
async def square_batch(request: BatchSquareRequest) -> dict:
    """Square every value concurrently; outcomes come back in request order."""
    outcomes = await asyncio.gather(*(_square.run(n) for n in request.values))
    for n, outcome in zip(request.values, outcomes):
        _log_outcome(n, outcome)
    return {"outcomes": [_outcome_to_dict(n, o) for n, o in zip(request.values, outcomes)]}


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value):
        return dataclasses.asdict(value)
    return value


@app.get("/examples")
def examples() -> dict:
    """Return the result of every example snippet."""
    return {name: _jsonable(value) for name, value in collect_examples().items()}


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "delay_ms": _square.delay_ms}
