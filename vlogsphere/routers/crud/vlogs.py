import logging
from datetime import datetime
from typing import Any, List, Optional

from fastapi import HTTPException
from pydantic import HttpUrl

from vlogsphere.config import settings
from vlogsphere.db.models.vlogs import AuthorPreview, Vlog, VlogInput, VlogUpdate
from vlogsphere.db.redis_client import delete_cache, get_cache, set_cache
from vlogsphere.routers.automations.tagging.tagger import generate_tags

LOG = logging.getLogger(__name__)

MAX_TAG_LENGTH = 30


def convert_httpurls_to_str(data: Any):
    if isinstance(data, dict):
        return {k: convert_httpurls_to_str(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [convert_httpurls_to_str(item) for item in data]
    elif isinstance(data, HttpUrl):
        return str(data)
    return data


def merge_tags(existing: List[str], generated: List[str]) -> List[str]:
    extra = [t for t in generated if len(t) <= MAX_TAG_LENGTH]
    return list(dict.fromkeys([*existing, *extra]))


def auto_tags(description: str, category: Optional[str]) -> List[str]:
    tags = generate_tags(description, category or "other", settings.AI_MAX_TAGS)
    LOG.info("Generated %d tags for %s vlog", len(tags), category or "other")
    return tags


async def create_vlog(db, current_user: dict, vlog_input: VlogInput):
    data = vlog_input.model_dump()

    if (
        settings.AI_TAGGING_ENABLED
        and len(vlog_input.description) >= settings.MIN_DESCRIPTION_LENGTH
    ):
        generated = auto_tags(vlog_input.description, vlog_input.category)
        data["tags"] = merge_tags(data["tags"], generated)
        data["ai_generated_tags"] = True

    author = AuthorPreview(
        user_id=current_user["user_id"],
        username=current_user.get("username"),
        avatar=current_user.get("avatar"),
    )
    vlog = Vlog(author=author, **data)

    vlog_dict = convert_httpurls_to_str(vlog.model_dump())
    vlog_dict["_id"] = vlog.vlog_id
    await db.vlogs.insert_one(vlog_dict)

    LOG.info("Vlog %s created by %s", vlog.vlog_id, author.user_id)
    return vlog_dict


async def get_vlog_by_id(db, vlog_id: str):
    cache_key = f"vlog:{vlog_id}"

    # 1. Redis check
    cached = await get_cache(cache_key)
    if cached:
        LOG.debug("Vlog %s returned from cache", vlog_id)
        return cached

    # 2. DB fallback
    doc = await db.vlogs.find_one({"_id": vlog_id})
    if not doc:
        raise HTTPException(status_code=404, detail="Vlog not found")

    # 3. Cache & return
    await set_cache(cache_key, doc)
    return doc


async def update_vlog(db, vlog_id: str, current_user: dict, update: VlogUpdate):
    doc = await db.vlogs.find_one({"_id": vlog_id})
    if not doc:
        raise HTTPException(status_code=404, detail="Vlog not found")

    is_author = doc["author"]["user_id"] == current_user["user_id"]
    if not is_author and current_user.get("role") != "admin":
        raise HTTPException(status_code=403, detail="Not authorized to update this vlog")

    changes = convert_httpurls_to_str(update.model_dump(exclude_unset=True))

    # Re-tag on every description change, regardless of its length
    if changes.get("description") and settings.AI_TAGGING_ENABLED:
        category = changes.get("category") or doc.get("category")
        generated = auto_tags(changes["description"], category)
        base_tags = changes.get("tags")
        if base_tags is None:
            base_tags = doc.get("tags", [])
        changes["tags"] = merge_tags(base_tags, generated)
        changes["ai_generated_tags"] = True

    changes["updated_at"] = datetime.utcnow()

    result = await db.vlogs.update_one({"_id": vlog_id}, {"$set": changes})
    if result.matched_count == 0:
        raise HTTPException(status_code=404, detail="Vlog not found")

    await delete_cache(f"vlog:{vlog_id}")
    doc.update(changes)
    return doc
