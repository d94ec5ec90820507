"""
Locate pipeline - main orchestrator for finding where an edit belongs.
Coordinates: Intent → Search plan → Content search → Target selection
"""
import logging
import time
from dataclasses import dataclass, field
from typing import Optional

from edit_locator.services.intent import EditIntent, classify_intent
from edit_locator.services.manifest import ProjectManifest
from edit_locator.services.search import (
    SearchExecutionResult,
    SearchPlan,
    TargetSelection,
    execute_search_plan,
    select_target_file,
)
from edit_locator.services.search.planner import build_search_plan, create_search_plan

logger = logging.getLogger(__name__)


@dataclass
class LocateStep:
    """A single step in the pipeline trace."""
    name: str
    status: str          # completed, failed
    duration_ms: int
    details: dict = field(default_factory=dict)


@dataclass
class LocateResult:
    """Complete result of a locate run."""
    success: bool
    message: str
    trace: list[LocateStep]
    total_duration_ms: int

    intent: Optional[EditIntent] = None
    plan: Optional[SearchPlan] = None
    search: Optional[SearchExecutionResult] = None
    target: Optional[TargetSelection] = None


async def locate_edit_target(
    instruction: str,
    manifest: ProjectManifest,
    use_llm_plan: bool = False,
    verbose: bool = True
) -> LocateResult:
    """
    Run the locate pipeline:
    1. Classify the intent (pattern tables, no model)
    2. Build a search plan (heuristic, or LLM when use_llm_plan)
    3. Search the manifest file contents
    4. Select the target file/line for the plan's edit type

    LLM errors in step 2 propagate to the caller.
    """
    trace: list[LocateStep] = []
    start_time = time.time()

    def log_step(name: str, status: str, step_start: float, details: dict = None):
        duration_ms = int((time.time() - step_start) * 1000)
        trace.append(LocateStep(name=name, status=status, duration_ms=duration_ms, details=details or {}))

        status_icon = "✓" if status == "completed" else "✗"
        logger.info(f"[Locate] {status_icon} {name} ({duration_ms}ms)")
        if details and verbose:
            for k, v in details.items():
                logger.debug(f"  {k}: {v}")

    # =========================================================================
    # STEP 1: Classify intent
    # =========================================================================
    step_start = time.time()
    intent = classify_intent(instruction, manifest)
    log_step("classify_intent", "completed", step_start, {
        "type": intent.type.value,
        "confidence": intent.confidence,
        "target_files": intent.target_files
    })

    # =========================================================================
    # STEP 2: Search plan
    # =========================================================================
    step_start = time.time()
    if use_llm_plan:
        plan = await create_search_plan(instruction, manifest)
    else:
        plan = build_search_plan(instruction, intent)
    log_step("search_plan", "completed", step_start, {
        "source": "llm" if use_llm_plan else "heuristic",
        "edit_type": plan.edit_type,
        "terms": plan.search_terms,
        "patterns": plan.regex_patterns or []
    })

    # =========================================================================
    # STEP 3: Content search
    # =========================================================================
    step_start = time.time()
    search = execute_search_plan(plan, manifest.file_contents())
    log_step("search", "completed" if search.success else "failed", step_start, {
        "results": len(search.results),
        "files_searched": search.files_searched,
        "search_type": search.search_type,
        "used_fallback": search.used_fallback
    })

    # =========================================================================
    # STEP 4: Target selection
    # =========================================================================
    step_start = time.time()
    target = select_target_file(search.results, plan.edit_type or intent.type.value)
    total_duration_ms = int((time.time() - start_time) * 1000)

    if target is None:
        log_step("select_target", "failed", step_start)
        return LocateResult(
            success=False,
            message=search.error or "No edit target found",
            trace=trace,
            total_duration_ms=total_duration_ms,
            intent=intent,
            plan=plan,
            search=search
        )

    log_step("select_target", "completed", step_start, {
        "file": target.file_path,
        "line": target.line_number,
        "reason": target.reason
    })

    return LocateResult(
        success=True,
        message=f"{target.file_path}:{target.line_number} - {target.reason}",
        trace=trace,
        total_duration_ms=total_duration_ms,
        intent=intent,
        plan=plan,
        search=search,
        target=target
    )
