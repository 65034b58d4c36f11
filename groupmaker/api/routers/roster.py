# groupmaker/api/routers/roster.py
"""
Roster endpoints: import names from pasted text or uploaded file content, suggest a group size.
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from groupmaker.config.settings import settings
from groupmaker.services.roster_service import merge_names, parse_names, suggest_group_size

router = APIRouter()


class ImportReq(BaseModel):
    content: str
    filename: Optional[str] = None
    existing: List[str] = []


class SuggestSizeReq(BaseModel):
    count: int
    group_size: int = settings.GROUP_SIZE_DEFAULT


@router.post("/import", summary="Add names from text or CSV content to a roster")
async def import_names(req: ImportReq):
    names = parse_names(req.content, req.filename)
    if not names:
        raise HTTPException(status_code=400, detail="Please enter at least one name")
    roster, added = merge_names(req.existing, names)
    return {"names": roster, "added": added}


@router.post("/suggest-size", summary="Check a group size against the roster size")
async def suggest_size(req: SuggestSizeReq):
    if req.count < 2:
        raise HTTPException(status_code=400, detail="Please add at least 2 names")
    size, adjusted, message = suggest_group_size(req.count, req.group_size)
    return {"group_size": size, "adjusted": adjusted, "message": message}
