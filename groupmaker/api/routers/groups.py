# groupmaker/api/routers/groups.py
"""
Group endpoints: validate constraints, generate groups, export groups as text.
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from groupmaker.domain.errors import InfeasibleConstraintsError, PreconditionError
from groupmaker.domain.models import FeasibilityResult, Group
from groupmaker.services.group_service import GroupService
from groupmaker.services.roster_service import export_groups_text

router = APIRouter()


class GenerateGroupsReq(BaseModel):
    names: List[str]
    group_size: int
    exceptions: List[List[str]] = []
    together: List[List[str]] = []
    seed: Optional[int] = None


class GenerateGroupsResp(BaseModel):
    groups: List[Group]
    warnings: List[str] = []
    swaps: int = 0


class ValidateReq(BaseModel):
    names: List[str]
    group_size: int
    together: List[List[str]] = []


class ExportReq(BaseModel):
    groups: List[Group]
    title: Optional[str] = None


@router.post("/generate", response_model=GenerateGroupsResp, summary="Partition a roster into groups")
async def generate_groups(req: GenerateGroupsReq):
    service = GroupService()
    try:
        result = service.generate(req.names, req.group_size, req.exceptions, req.together, seed=req.seed)
    except InfeasibleConstraintsError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except PreconditionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return GenerateGroupsResp(groups=result.groups, warnings=result.warnings, swaps=result.swaps)


@router.post("/validate", response_model=FeasibilityResult, summary="Check together constraints against the group size")
async def validate_groups(req: ValidateReq):
    return GroupService().validate(req.names, req.together, req.group_size)


@router.post("/export", response_class=PlainTextResponse, summary="Export groups as a text file")
async def export_groups(req: ExportReq):
    return PlainTextResponse(
        export_groups_text(req.groups, req.title),
        headers={"Content-Disposition": 'attachment; filename="generated_groups.txt"'},
    )
