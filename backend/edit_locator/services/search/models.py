"""
Search plan and result types shared by the search executor, planners and target selector.
"""
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_FILE_TYPES = [".jsx", ".tsx", ".js", ".ts"]

CONFIDENCE_ORDER = {"high": 3, "medium": 2, "low": 1}
COMPONENT_TYPE_ORDER = {"page": 5, "layout": 4, "component": 3, "hook": 2, "utility": 1}
ELEMENT_TYPE_ORDER = {"jsx": 4, "style": 3, "state": 2, "function": 1, "import": 0}


@dataclass
class FallbackSearch:
    terms: list[str] = field(default_factory=list)
    patterns: Optional[list[str]] = None


@dataclass
class SearchPlan:
    """Literal terms and regexes describing where an edit target lives."""
    search_terms: list[str] = field(default_factory=list)
    regex_patterns: Optional[list[str]] = None
    file_types_to_search: list[str] = field(default_factory=lambda: list(DEFAULT_FILE_TYPES))
    priority_files: Optional[list[str]] = None
    exclude_files: Optional[list[str]] = None
    fallback_search: Optional[FallbackSearch] = None

    # Informational, set by whoever produced the plan
    edit_type: Optional[str] = None
    reasoning: str = ""
    expected_matches: int = 1


@dataclass
class SearchResult:
    """One matching line."""
    file_path: str
    line_number: int                # 1-indexed
    line_content: str               # trimmed
    confidence: str                 # high, medium, low
    matched_term: Optional[str] = None
    matched_pattern: Optional[str] = None
    context_before: list[str] = field(default_factory=list)
    context_after: list[str] = field(default_factory=list)
    component_type: Optional[str] = None   # page, layout, component, hook, utility
    element_type: Optional[str] = None     # jsx, style, import, state, function


@dataclass
class SearchExecutionResult:
    success: bool
    results: list[SearchResult]
    files_searched: int
    execution_time_ms: int
    used_fallback: bool
    search_type: str                # exact, fuzzy, semantic
    error: Optional[str] = None


@dataclass
class TargetSelection:
    """The single location an edit should be made at."""
    file_path: str
    line_number: int
    reason: str


def result_sort_key(result: SearchResult) -> tuple[int, int, int]:
    """Sort key for best-first ordering (use with a stable sort)."""
    return (
        -CONFIDENCE_ORDER.get(result.confidence, 0),
        -COMPONENT_TYPE_ORDER.get(result.component_type or "", 0),
        -ELEMENT_TYPE_ORDER.get(result.element_type or "", 0),
    )
