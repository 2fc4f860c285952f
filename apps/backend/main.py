from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from agents.query_service import QueryService
from apps.backend.llm.ollama_client import close_client, get_client
from insu_core.config import InsuSettings, get_settings
from insu_core.errors import ExtractionError, InferenceError, InputError
from insu_core.models import ChatAnswer, ChatRequest

_log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    yield
    close_client()


app = FastAPI(title="Insu PDF Chat API", lifespan=lifespan)

# CORS: the desktop UI calls the API from its own origin, no credentials involved
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def _settings() -> InsuSettings:
    return get_settings()


def get_query_service() -> QueryService:
    settings = _settings()
    return QueryService(settings=settings, client=get_client(settings))


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# Plain def: the blocking corpus load and inference call run in the worker thread pool.
@app.post("/api/chat", response_model=ChatAnswer)
def chat(req: ChatRequest, service: QueryService = Depends(get_query_service)) -> ChatAnswer:
    try:
        answer = service.handle(req)
    except InputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InferenceError as exc:
        _log.exception("Inference call failed")
        raise HTTPException(status_code=502, detail=f"Inference failed: {exc}") from exc
    except ExtractionError as exc:
        _log.exception("Strict corpus load failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return ChatAnswer(answer=answer)


__all__ = ["app", "get_query_service"]
