"""
Convert Router
==============
Endpoint for running a styling migration.
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException

from convert_styling import api as core_api
from convert_styling.guides import Guide
from convert_styling.model import ErrorKind
from convert_styling.web_api.config import settings
from convert_styling.web_api.dependencies import current_guide
from convert_styling.web_api.schemas.convert import ConvertResponse, ConvertSummary

router = APIRouter()

_ERROR_STATUS = {
    ErrorKind.INPUT_VALIDATION: 422,
    ErrorKind.ROOT_NOT_FOUND: 404,
    ErrorKind.PLATFORM_PATH_MISMATCH: 400,
    ErrorKind.GUIDE_UNAVAILABLE: 503,
}


@router.post("/", response_model=ConvertResponse)
def run_convert(
    payload: Dict[str, Any] = Body(...),
    guide: Guide = Depends(current_guide),
):
    """
    Scan a project and optionally apply the mechanical migration steps.

    - **projectRoot**: directory on the server (ignored when files is non-empty)
    - **files**: in-memory file set; edits come back as a bundle
    - **apply**: write to disk (disk mode only, default false)
    """
    resp = core_api.convert_styling(
        payload,
        project_root_fallback=settings.PROJECT_ROOT,
        guide=guide,
    )
    if resp.error is not None:
        raise HTTPException(status_code=_ERROR_STATUS[resp.error], detail=resp.text)

    return ConvertResponse(
        text=resp.text,
        summary=ConvertSummary(**resp.result.summary()),
        result=resp.result.to_dict(),
    )
