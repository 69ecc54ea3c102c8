from fastapi import APIRouter, Request, Depends

from vlogsphere.db.models.vlogs import VlogInput, VlogUpdate
from vlogsphere.routers.crud.vlogs import create_vlog, get_vlog_by_id, update_vlog
from vlogsphere.security.dependencies import get_current_user

router = APIRouter(prefix="/vlogs", tags=["Vlogs"])


# ------------------ ✅ VLOGS ------------------ #

@router.post("/", status_code=201)
async def post_vlog(
    request: Request,
    vlog_input: VlogInput,
    current_user: dict = Depends(get_current_user)
):
    db = request.app.mongodb
    vlog = await create_vlog(db, current_user, vlog_input)
    return {"success": True, "data": vlog}


@router.get("/{vlog_id}")
async def get_vlog(vlog_id: str, request: Request):
    db = request.app.mongodb
    return {"success": True, "data": await get_vlog_by_id(db, vlog_id)}


@router.put("/{vlog_id}")
async def put_vlog(
    vlog_id: str,
    update: VlogUpdate,
    request: Request,
    current_user: dict = Depends(get_current_user)
):
    db = request.app.mongodb
    vlog = await update_vlog(db, vlog_id, current_user, update)
    return {"success": True, "data": vlog}
