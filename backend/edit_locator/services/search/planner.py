"""
Search planners - turn an edit prompt into a SearchPlan.

build_search_plan is the heuristic producer used by default; create_search_plan
asks an LLM and falls back to the heuristic plan when the model output is unusable.
The search executor treats both plans the same way.
"""
import logging
import re

from openai import AsyncOpenAI
from pydantic import ValidationError

from edit_locator.config import get_settings
from edit_locator.prompts import SEARCH_PLAN_SYSTEM_PROMPT, SEARCH_PLAN_USER_PROMPT
from edit_locator.schemas import SearchPlanModel
from edit_locator.services.intent.classifier import EditIntent, EditType, classify_intent
from edit_locator.services.intent.resolvers import (
    REMOVAL_PATTERN,
    UI_ELEMENTS,
    extract_component_names,
    extract_content_terms,
)
from edit_locator.services.manifest import ProjectManifest, basename
from edit_locator.services.search.models import FallbackSearch, SearchPlan

logger = logging.getLogger(__name__)
settings = get_settings()

STYLE_PATTERNS = [r"className=[\"'{`]"]
ROUTER_PATTERNS = [r"<Route\b", r"createBrowserRouter"]


def _extract_json(content: str) -> str:
    """Extract JSON from LLM response, handling markdown code blocks."""
    content = content.strip()
    if content.startswith("```"):
        first_newline = content.find("\n")
        if first_newline != -1:
            content = content[first_newline + 1:]
        if content.endswith("```"):
            content = content[:-3]
        content = content.strip()
    return content


def _stem(path: str) -> str:
    return basename(path).split(".", 1)[0].lower()


def build_search_plan(prompt: str, intent: EditIntent) -> SearchPlan:
    """
    Heuristic plan: the literal text the prompt points at, else the words that
    name a target file or a common UI element. Remaining words become the fallback.
    """
    words = extract_component_names(prompt)
    terms = extract_content_terms(prompt)

    if terms:
        reasoning = "Searching for the literal text referenced in the request"
    else:
        target_stems = {_stem(path) for path in intent.target_files}
        terms = [w for w in words if w in target_stems or w in UI_ELEMENTS]
        reasoning = "Searching for component names mentioned in the request"
    terms = list(dict.fromkeys(terms))

    patterns: list[str] = []
    if intent.type == EditType.UPDATE_STYLE:
        patterns.extend(STYLE_PATTERNS)
    elif intent.type == EditType.ADD_FEATURE and "page" in prompt.lower():
        patterns.extend(ROUTER_PATTERNS)

    lowered_terms = {t.lower() for t in terms}
    fallback_terms = [w for w in dict.fromkeys(words) if w not in lowered_terms]

    edit_type = "REMOVE_ELEMENT" if REMOVAL_PATTERN.search(prompt) else intent.type.value

    plan = SearchPlan(
        search_terms=terms,
        regex_patterns=patterns or None,
        priority_files=list(intent.target_files),
        fallback_search=FallbackSearch(terms=fallback_terms) if fallback_terms else None,
        edit_type=edit_type,
        reasoning=reasoning,
    )
    logger.info(f"[planner] Heuristic plan: type={edit_type}, terms={terms}, patterns={patterns}")
    return plan


def summarize_manifest(manifest: ProjectManifest) -> str:
    """One line per file: path, component name and the components it renders."""
    lines = []
    for path, record in manifest.files.items():
        # Skip entries that are not real files
        if "." not in path or re.search(r"/\d+$", path):
            continue
        name = record.component_name or basename(path)
        children = ", ".join(record.component_info.child_components) if record.component_info else ""
        lines.append(f"- {path} ({name}, renders: {children or 'none'})")
    return "\n".join(lines)


async def create_search_plan(prompt: str, manifest: ProjectManifest) -> SearchPlan:
    """
    Ask the search-plan model where to look. Falls back to the heuristic
    plan when the response is not a valid plan.
    """
    client = AsyncOpenAI(
        api_key=settings.llm_api_key,
        base_url=settings.llm_base_url
    )

    user_prompt = SEARCH_PLAN_USER_PROMPT.format(
        prompt=prompt,
        file_summary=summarize_manifest(manifest)
    )

    logger.info(f"Creating search plan: {prompt[:80]}...")

    response = await client.chat.completions.create(
        model=settings.model_search_plan,
        messages=[
            {"role": "system", "content": SEARCH_PLAN_SYSTEM_PROMPT},
            {"role": "user", "content": user_prompt}
        ],
        response_format={"type": "json_object"},
        temperature=settings.llm_temperature,
        max_tokens=settings.search_plan_max_tokens
    )

    content = response.choices[0].message.content or ""
    usage = response.usage
    if usage:
        logger.debug(f"Search plan tokens: {usage.total_tokens}")
    logger.debug(f"Search plan result: {content}")

    try:
        plan = SearchPlanModel.model_validate_json(_extract_json(content)).to_plan()
    except (ValidationError, ValueError) as e:
        logger.warning(f"Search plan parsing failed: {e}, using heuristic plan")
        return build_search_plan(prompt, classify_intent(prompt, manifest))

    logger.info(f"LLM plan: type={plan.edit_type}, terms={plan.search_terms}, "
                f"patterns={len(plan.regex_patterns or [])}")
    logger.info(f"Plan reasoning: {plan.reasoning}")
    return plan
