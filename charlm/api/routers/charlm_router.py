import logging
from dataclasses import asdict
from typing import Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from charlm.config import settings
from charlm.services.language_model import LanguageModel, train_from_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/charlm", tags=["charlm"])

# In-memory model cache
MODEL_CACHE: Dict[str, LanguageModel] = {}


class TrainRequest(BaseModel):
    corpus: str
    window_length: int = Field(default=settings.DEFAULT_WINDOW_LENGTH, ge=1)
    seed: Optional[int] = Field(default=settings.RANDOM_SEED)
    model_name: str = "default"


class GenerateRequest(BaseModel):
    model_name: str = "default"
    initial_text: str = Field(..., min_length=1)
    text_length: int = Field(
        default=settings.DEFAULT_TEXT_LENGTH, ge=0, le=settings.MAX_TEXT_LENGTH
    )


def get_model(model_name: str) -> LanguageModel:
    model = MODEL_CACHE.get(model_name)
    if model is None:
        raise HTTPException(status_code=404, detail="model not found, train first")
    return model


@router.post("/train")
async def train(req: TrainRequest):
    if not req.corpus:
        raise HTTPException(status_code=400, detail="corpus is empty")
    model = train_from_text(req.corpus, req.window_length, seed=req.seed)
    MODEL_CACHE[req.model_name] = model
    logger.info(f"[CharLM] Cached model '{req.model_name}' ({len(model.char_data_map)} windows)")
    return {
        "ok": True,
        "data": {
            "model": req.model_name,
            "window_length": model.window_length,
            "windows": len(model.char_data_map),
        },
    }


@router.post("/generate")
async def generate(req: GenerateRequest):
    model = get_model(req.model_name)
    text = model.generate(req.initial_text, req.text_length)
    return {"ok": True, "data": {"text": text}}


@router.get("/models/{model_name}")
async def model_stats(model_name: str):
    model = get_model(model_name)
    return {"ok": True, "data": asdict(model.get_stats())}


@router.get("/models/{model_name}/dump")
async def model_dump(model_name: str):
    model = get_model(model_name)
    return {"ok": True, "data": {"dump": str(model)}}
