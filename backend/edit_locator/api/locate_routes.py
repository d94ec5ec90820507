"""
Locate API routes - full intent → search → target pipeline for a project.
"""
import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException
from openai import OpenAIError

from edit_locator.config import get_settings
from edit_locator.schemas import (
    IntentInfo,
    LocateRequest,
    LocateResponse,
    LocateStepInfo,
    SearchPlanModel,
    SearchResponse,
    TargetInfo,
)
from edit_locator.services.locator import locate_edit_target
from edit_locator.services.manifest import ProjectManifest
from edit_locator.services.project import build_manifest

logger = logging.getLogger(__name__)
router = APIRouter()
settings = get_settings()


def get_project_path(project: str) -> Path:
    """Resolve and validate project path."""
    base_path = Path(settings.projects_base_path)
    if not base_path.is_absolute():
        backend_dir = Path(__file__).parent.parent.parent
        base_path = backend_dir / base_path
    base_path = base_path.resolve()
    project_path = (base_path / project).resolve()

    # Absolute names and ../ segments must not escape the projects directory
    if not project_path.is_relative_to(base_path) or not project_path.is_dir():
        raise HTTPException(
            status_code=404,
            detail=f"Project '{project}' not found"
        )

    return project_path


def load_manifest(request: LocateRequest) -> ProjectManifest:
    if request.project:
        manifest = build_manifest(get_project_path(request.project))
        if not manifest.files:
            raise HTTPException(
                status_code=400,
                detail=f"No source files found in project '{request.project}'"
            )
        return manifest

    if request.manifest is not None:
        manifest = request.manifest.to_manifest()
        if not manifest.files:
            raise HTTPException(
                status_code=400,
                detail="No valid files found in manifest"
            )
        return manifest

    raise HTTPException(
        status_code=400,
        detail="Either 'project' or 'manifest' is required"
    )


@router.post("", response_model=LocateResponse)
async def locate(request: LocateRequest) -> LocateResponse:
    """
    Find where an instruction's edit belongs.

    Pipeline:
    1. Intent classification (pattern tables) - edit type and target files
    2. Search plan (heuristic, or model_search_plan when use_llm_plan)
    3. Line-level content search with fallback ladder
    4. Target selection for the edit type
    """
    logger.info(f"[Locate] Request: project={request.project}, instruction={request.instruction[:50]}...")

    manifest = load_manifest(request)
    use_llm_plan = (
        request.use_llm_plan if request.use_llm_plan is not None else settings.locator_use_llm_plan
    )

    try:
        result = await locate_edit_target(
            instruction=request.instruction,
            manifest=manifest,
            use_llm_plan=use_llm_plan,
            verbose=settings.locator_verbose
        )
    except OpenAIError as e:
        logger.error(f"[Locate] Search plan model failed: {e}")
        raise HTTPException(
            status_code=502,
            detail=f"Search plan generation failed: {str(e)}"
        )
    except Exception as e:
        logger.error(f"[Locate] Error: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Locate failed: {str(e)}"
        )

    target = TargetInfo.from_selection(result.target) if result.target else None

    # Minimal response when verbose is disabled
    if not settings.locator_verbose:
        return LocateResponse(
            success=result.success,
            target=target,
            message=result.message,
            total_duration_ms=result.total_duration_ms
        )

    return LocateResponse(
        success=result.success,
        target=target,
        message=result.message,
        total_duration_ms=result.total_duration_ms,
        intent=IntentInfo.from_intent(result.intent) if result.intent else None,
        plan=SearchPlanModel.from_plan(result.plan) if result.plan else None,
        search=SearchResponse.from_execution(result.search) if result.search else None,
        trace=[
            LocateStepInfo(
                name=step.name,
                status=step.status,
                duration_ms=step.duration_ms,
                details=step.details
            )
            for step in result.trace
        ]
    )
