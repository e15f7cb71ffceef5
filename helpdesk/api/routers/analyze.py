"""Content analysis API endpoint.

Routes:
- POST /analyze - Analyze free text (summary, sentiment, suggestions, keywords)

Dependencies: helpdesk.core.analysis
System role: Content analysis HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request

from helpdesk.api.deps import get_analysis_pipeline
from helpdesk.api.routers.router_utils import handle_helpdesk_errors, parse_body
from helpdesk.core.analysis.pipeline import AnalysisPipeline
from helpdesk.core.exceptions import InvalidInputError
from helpdesk.models.analysis import AnalysisRequest, AnalyzeRequestBody, AnalyzeResponse
from helpdesk.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
@handle_helpdesk_errors("Failed to analyze content")
async def analyze(
    request: Request,
    pipeline: AnalysisPipeline = Depends(get_analysis_pipeline),
) -> AnalyzeResponse:
    """Analyze content, chunking long input.

    Flow:
    1. Parse body ({content, context?})
    2. Run the analysis pipeline
    3. Return {analysis}

    Args:
        request: Raw request (body parsed manually for portal-style errors)
        pipeline: Injected AnalysisPipeline

    Returns:
        AnalyzeResponse: Merged analysis

    Error responses:
        400: Malformed body or missing content
        429: Provider quota exhausted
        504: Single-chunk analysis exceeded its deadline
        500: Any other failure
    """
    body = await parse_body(request, AnalyzeRequestBody)
    if not body.content:
        raise InvalidInputError("Missing required field: content", field="content")

    analysis = await pipeline.analyze(
        AnalysisRequest(content=body.content, context=body.context)
    )
    return AnalyzeResponse(analysis=analysis)
