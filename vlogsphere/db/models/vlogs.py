from pydantic import BaseModel, Field, HttpUrl, field_validator
from typing import List, Optional
from datetime import datetime
from enum import Enum
from uuid import uuid4


class VlogCategory(str, Enum):
    technology = "technology"
    travel = "travel"
    lifestyle = "lifestyle"
    food = "food"
    fashion = "fashion"
    fitness = "fitness"
    music = "music"
    art = "art"
    business = "business"
    education = "education"
    entertainment = "entertainment"
    gaming = "gaming"
    sports = "sports"
    health = "health"
    science = "science"
    photography = "photography"
    diy = "diy"
    other = "other"


def _clean_tags(tags: Optional[List[str]]) -> Optional[List[str]]:
    if tags is None:
        return None
    cleaned = []
    for tag in tags:
        tag = tag.strip().lower()
        if not 2 <= len(tag) <= 30:
            raise ValueError("Each tag must be a string between 2 and 30 characters")
        cleaned.append(tag)
    return cleaned


# Lightweight reference to the vlog's author
class AuthorPreview(BaseModel):
    user_id: str = Field(..., description="ID of the user")
    username: Optional[str] = None
    avatar: Optional[HttpUrl] = None

# Images are already hosted; only the reference is stored
class VlogImage(BaseModel):
    url: HttpUrl
    public_id: str
    caption: str = Field(default="", max_length=200)
    order: int = 0

# What the client sends when creating a vlog
class VlogInput(BaseModel):
    model_config = {"use_enum_values": True}

    title: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=10, max_length=2000)
    content: str = Field(default="", max_length=10000)
    category: VlogCategory
    tags: List[str] = Field(default_factory=list)
    images: List[VlogImage] = Field(default_factory=list, max_length=10)
    is_public: bool = True

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return v.strip()

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: List[str]) -> List[str]:
        return _clean_tags(v)

# Partial update; unset fields are left alone
class VlogUpdate(BaseModel):
    model_config = {"use_enum_values": True}

    title: Optional[str] = Field(None, min_length=3, max_length=100)
    description: Optional[str] = Field(None, min_length=10, max_length=2000)
    content: Optional[str] = Field(None, max_length=10000)
    category: Optional[VlogCategory] = None
    tags: Optional[List[str]] = Field(None, max_length=10)
    images: Optional[List[VlogImage]] = Field(None, min_length=1, max_length=10)
    is_public: Optional[bool] = None

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _clean_tags(v)

# Full vlog saved in DB
class Vlog(VlogInput):
    vlog_id: str = Field(default_factory=lambda: str(uuid4()))
    author: AuthorPreview
    views: int = 0
    shares: int = 0
    likes: List[str] = Field(default_factory=list)
    dislikes: List[str] = Field(default_factory=list)
    ai_generated_tags: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None
