"""Subsidy analysis endpoint."""

import json
import logging
import traceback
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from energiepilot.deps import get_analysis_service
from energiepilot.models.schemas.analysis import AnalysisResponse, ErrorResponse
from energiepilot.services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)

router = APIRouter()


def _reject_constant(name: str) -> None:
    """NaN and Infinity are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


@router.post(
    "/analyse",
    response_model=AnalysisResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid JSON body"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
    summary="Analyse a renovation project",
    description="Match a renovation project against the subsidy programs and compute funding rates",
)
async def analyse(
    request: Request,
    service: Annotated[AnalysisService, Depends(get_analysis_service)],
):
    """
    Analyse a renovation project.

    The body is a free-form JSON object describing the project, e.g.:
    - target_eh_class: target efficiency house class ("55", "40", ...)
    - use_ee_class: whether the EE class bonus applies
    - has_wpb_bonus / has_sersan_bonus: optional loan boni
    - has_isfp: individual renovation roadmap present
    - measure_selected: selected renovation measure

    Returns the program keys before and after the measure filter and one
    result per remaining program with rate, maximum amount and notes.
    """
    body = await request.body()
    try:
        payload = json.loads(body or b"{}", parse_constant=_reject_constant)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON body",
        )

    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON body",
        )

    try:
        return service.analyse(payload)
    except Exception as e:
        logger.error(f"Error running analysis: {str(e)}", exc_info=True)
        trace = "".join(traceback.format_exception(type(e), e, e.__traceback__))
        error = ErrorResponse(
            errorType=type(e).__name__,
            errorMessage=str(e),
            trace=[line.strip() for line in trace.splitlines()],
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error.model_dump(),
        )
