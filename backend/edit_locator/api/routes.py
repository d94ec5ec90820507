"""
Intent and search API routes - thin wrappers over the pure core functions.
"""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from openai import OpenAIError

from edit_locator.schemas import (
    FileContextResponse,
    IntentInfo,
    IntentRequest,
    SearchPlanModel,
    SearchPlanRequest,
    SearchRequest,
    SearchResponse,
    SelectTargetRequest,
    TargetInfo,
)
from edit_locator.services.intent import classify_intent, select_files_for_edit
from edit_locator.services.search import (
    execute_search_plan,
    format_search_results,
    select_target_file,
)
from edit_locator.services.search.planner import build_search_plan, create_search_plan

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/intent/analyze", response_model=IntentInfo)
async def analyze_intent(request: IntentRequest) -> IntentInfo:
    """Classify an edit prompt and resolve its target files (no model calls)."""
    manifest = request.manifest.to_manifest()
    logger.info(f"Analyze intent: prompt={request.prompt[:50]!r}, files={len(manifest.files)}")

    intent = classify_intent(request.prompt, manifest)
    return IntentInfo.from_intent(intent)


@router.post("/intent/context", response_model=FileContextResponse)
async def edit_context(request: IntentRequest) -> FileContextResponse:
    """Files to edit, reference files and the editing brief for a prompt."""
    manifest = request.manifest.to_manifest()
    context = select_files_for_edit(request.prompt, manifest)

    return FileContextResponse(
        primary_files=context.primary_files,
        context_files=context.context_files,
        intent=IntentInfo.from_intent(context.edit_intent),
        instruction=context.instruction
    )


@router.post("/search/plan", response_model=SearchPlanModel)
async def search_plan(request: SearchPlanRequest) -> SearchPlanModel:
    """Build a search plan for a prompt, heuristically or with the search-plan model."""
    manifest = request.manifest.to_manifest()

    if not manifest.files:
        raise HTTPException(
            status_code=400,
            detail="No valid files found in manifest"
        )

    if not request.use_llm:
        plan = build_search_plan(request.prompt, classify_intent(request.prompt, manifest))
        return SearchPlanModel.from_plan(plan)

    try:
        plan = await create_search_plan(request.prompt, manifest)
    except OpenAIError as e:
        logger.error(f"Search plan generation failed: {e}")
        raise HTTPException(
            status_code=502,
            detail=f"Search plan generation failed: {str(e)}"
        )

    return SearchPlanModel.from_plan(plan)


@router.post("/search/execute", response_model=SearchResponse)
async def search_execute(request: SearchRequest) -> SearchResponse:
    """Execute a search plan over the given file contents."""
    execution = execute_search_plan(request.plan.to_plan(), request.files)

    report = None
    if request.include_report:
        report = format_search_results(execution.results)

    return SearchResponse.from_execution(execution, report=report)


@router.post("/search/select-target", response_model=Optional[TargetInfo])
async def search_select_target(request: SelectTargetRequest) -> Optional[TargetInfo]:
    """Pick the edit location from ranked search results; null when there are none."""
    results = [r.to_result() for r in request.results]
    selection = select_target_file(results, request.edit_type)

    if selection is None:
        return None
    return TargetInfo.from_selection(selection)
