"""
Search executor - runs a search plan over project file contents.

Line-level term/regex search with structural confidence scoring, plus a
fallback ladder: primary search, then the plan's fallback search, then a
synonym-expanded search. A later tier only runs when the previous one found
nothing at all.
"""
import logging
import re
import time
from typing import Optional

from edit_locator.services.search.models import (
    DEFAULT_FILE_TYPES,
    SearchExecutionResult,
    SearchPlan,
    SearchResult,
    result_sort_key,
)

logger = logging.getLogger(__name__)

CONTEXT_LINES = 5

# Fixed synonym table for the semantic tier, matched in both directions
SEMANTIC_ALTERNATIVES: dict[str, list[str]] = {
    "header": ["navigation", "navbar", "nav", "appbar", "top"],
    "button": ["btn", "cta", "action", "link"],
    "footer": ["bottom", "copyright", "social"],
    "hero": ["banner", "jumbotron", "main", "landing"],
    "input": ["field", "form control", "textbox", "text field"],
    "modal": ["dialog", "popup", "overlay"],
    "card": ["panel", "box", "container", "item"],
}

NO_MATCH_ERROR = "No matches found for search terms"

EXPORTED_DEFINITION = re.compile(r"^\s*export\s+(default\s+)?(async\s+)?(function|class|const)\b")
STYLE_UTILITY_CLASS = re.compile(r"\b(bg|text|font|leading|tracking)-[\w\[]")
FUNCTION_SIGNATURE = re.compile(r"\w+\s*\([^)]*\)\s*{")


def determine_component_type(file_path: str, content: str) -> str:
    """Classify a file as page, layout, hook, utility or component from its path."""
    path = file_path.lower()
    file_name = path.rsplit("/", 1)[-1]

    if any(marker in path for marker in ("/pages/", "/app/", "page.", "route.")):
        return "page"
    if any(marker in path for marker in ("layout", "header", "footer", "sidebar")):
        return "layout"
    if file_name.startswith("use") or "function use" in content:
        return "hook"
    if (any(marker in path for marker in ("/utils/", "/lib/", "/helpers/"))
            or not path.endswith((".jsx", ".tsx"))):
        return "utility"
    return "component"


def determine_element_type(line: str, index: int, lines: list[str]) -> Optional[str]:
    """Classify a line as jsx, style, import, state or function, looking around it if unclear."""
    stripped = line.strip()

    if "<" in line and ">" in line:
        return "jsx"
    if "className" in line or "style=" in line or "tw`" in line or "css`" in line:
        return "style"
    if stripped.startswith("import") or "require(" in line:
        return "import"
    if "useState" in line or "useReducer" in line or "const [" in line or "this.state" in line:
        return "state"
    if "function " in line or "=>" in line or FUNCTION_SIGNATURE.search(line):
        return "function"

    surrounding = lines[max(0, index - 2):index] + lines[index + 1:index + 3]
    if any("<" in l and ">" in l for l in surrounding):
        return "jsx"
    if any("className" in l for l in surrounding):
        return "style"
    return None


def score_confidence(
    line: str,
    context_after: list[str],
    matched_term: Optional[str],
    component_type: str,
    element_type: Optional[str],
    base: str = "medium"
) -> str:
    confidence = base

    if EXPORTED_DEFINITION.search(line):
        confidence = "high"
    elif "className" in line and STYLE_UTILITY_CLASS.search(line):
        confidence = "high"
    elif "return" in line and any("<" in l for l in context_after):
        confidence = "high"
    elif matched_term and matched_term in line:
        confidence = "high"

    # Pages and layouts are where edits usually land
    if component_type in ("page", "layout"):
        confidence = "high"

    if element_type in ("jsx", "style") and confidence == "low":
        confidence = "medium"

    return confidence


def _compile_patterns(patterns: Optional[list[str]]) -> list[tuple[str, re.Pattern]]:
    compiled = []
    for pattern in patterns or []:
        try:
            compiled.append((pattern, re.compile(pattern, re.IGNORECASE)))
        except re.error as e:
            logger.warning(f"[search] Invalid regex pattern {pattern!r}: {e}")
    return compiled


def _eligible_files(plan: SearchPlan, files: dict[str, str]) -> list[tuple[str, str]]:
    """Files to scan, priority files first, excluded and foreign extensions dropped."""
    priority = plan.priority_files or []
    exclude = plan.exclude_files or []
    file_types = tuple(plan.file_types_to_search or DEFAULT_FILE_TYPES)

    eligible = [
        (path, content) for path, content in files.items()
        if not any(excluded in path for excluded in exclude) and path.endswith(file_types)
    ]
    # sorted() is stable: non-priority files keep their order
    return sorted(eligible, key=lambda item: not any(p in item[0] for p in priority))


def search_files(
    files: list[tuple[str, str]],
    terms: list[str],
    patterns: Optional[list[str]] = None,
    base_confidence: str = "medium"
) -> list[SearchResult]:
    """Scan every line of the given files for any term (case-insensitive) or regex."""
    terms = [term for term in terms if term]
    lowered_terms = [(term, term.lower()) for term in terms]
    compiled = _compile_patterns(patterns)
    results: list[SearchResult] = []

    for file_path, content in files:
        lines = content.split("\n")
        component_type = determine_component_type(file_path, content)

        for i, line in enumerate(lines):
            matched_term = None
            matched_pattern = None
            lower_line = line.lower()

            for term, lowered in lowered_terms:
                if lowered in lower_line:
                    matched_term = term
                    break

            if matched_term is None:
                for pattern, regex in compiled:
                    if regex.search(line):
                        matched_pattern = pattern
                        break

            if matched_term is None and matched_pattern is None:
                continue

            element_type = determine_element_type(line, i, lines)
            context_before = lines[max(0, i - CONTEXT_LINES):i]
            context_after = lines[i + 1:i + 1 + CONTEXT_LINES]

            results.append(SearchResult(
                file_path=file_path,
                line_number=i + 1,
                line_content=line.strip(),
                confidence=score_confidence(
                    line, context_after, matched_term, component_type, element_type,
                    base=base_confidence
                ),
                matched_term=matched_term,
                matched_pattern=matched_pattern,
                context_before=context_before,
                context_after=context_after,
                component_type=component_type,
                element_type=element_type,
            ))

    return results


def expand_semantic_terms(terms: list[str]) -> list[str]:
    """Related UI vocabulary for each term, in both directions of the synonym table."""
    expanded: list[str] = []
    for term in terms:
        lower_term = term.lower()
        for concept, alternatives in SEMANTIC_ALTERNATIVES.items():
            if concept in lower_term:
                expanded.extend(alternatives)
            elif any(alt in lower_term for alt in alternatives):
                expanded.append(concept)
    return list(dict.fromkeys(expanded))


def execute_search_plan(plan: SearchPlan, files: dict[str, str]) -> SearchExecutionResult:
    """
    Execute a search plan against {path: content}.

    Never raises. When nothing matches after the fallback ladder the result
    has success=False and an error message.
    """
    start_time = time.time()
    used_fallback = False
    search_type = "exact"

    eligible = _eligible_files(plan, files)
    results = search_files(eligible, plan.search_terms, plan.regex_patterns)

    if not results and plan.fallback_search:
        logger.info("[search] No results from primary search, trying fallback...")
        used_fallback = True
        search_type = "fuzzy"
        results = search_files(
            eligible,
            plan.fallback_search.terms,
            plan.fallback_search.patterns
        )

    if not results:
        logger.info("[search] No results from fallback, trying semantic search...")
        search_type = "semantic"
        semantic_terms = expand_semantic_terms(plan.search_terms)
        if semantic_terms:
            logger.debug(f"[search] Semantic terms: {semantic_terms}")
            results = search_files(eligible, semantic_terms, base_confidence="low")

    results.sort(key=result_sort_key)
    execution_time_ms = int((time.time() - start_time) * 1000)

    logger.info(f"[search] {len(results)} results in {len(eligible)} files "
                f"({search_type}, {execution_time_ms}ms)")

    return SearchExecutionResult(
        success=bool(results),
        results=results,
        files_searched=len(eligible),
        execution_time_ms=execution_time_ms,
        used_fallback=used_fallback,
        search_type=search_type,
        error=None if results else NO_MATCH_ERROR,
    )
