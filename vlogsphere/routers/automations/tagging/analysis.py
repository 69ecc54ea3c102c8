from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from vlogsphere.routers.automations.tagging.sentiment import analyze_sentiment
from vlogsphere.routers.automations.tagging.tagger import (
    extract_key_phrases, generate_tags, suggest_categories
)

router = APIRouter(prefix="/analysis", tags=["Analysis"])


class TagRequest(BaseModel):
    description: Optional[str] = None
    category: str = "other"
    max_tags: int = Field(8, ge=0, le=50)

class CategoryRequest(BaseModel):
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

class SentimentRequest(BaseModel):
    description: Optional[str] = None

class KeyPhraseRequest(BaseModel):
    description: Optional[str] = None
    max_phrases: int = Field(5, ge=0, le=50)


@router.post("/tags")
async def analyze_tags(payload: TagRequest):
    return {"tags": generate_tags(payload.description, payload.category, payload.max_tags)}

@router.post("/categories")
async def analyze_categories(payload: CategoryRequest):
    return {"categories": suggest_categories(payload.description, payload.tags)}

@router.post("/sentiment")
async def analyze_text_sentiment(payload: SentimentRequest):
    return {"sentiment": analyze_sentiment(payload.description)}

@router.post("/key-phrases")
async def analyze_key_phrases(payload: KeyPhraseRequest):
    return {"phrases": extract_key_phrases(payload.description, payload.max_phrases)}
