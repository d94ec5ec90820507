"""
Content search - run search plans over project files and pick the edit location.
"""

from .executor import execute_search_plan
from .formatting import format_search_results
from .models import (
    FallbackSearch,
    SearchExecutionResult,
    SearchPlan,
    SearchResult,
    TargetSelection,
)
from .targeting import select_target_file

__all__ = [
    "execute_search_plan",
    "format_search_results",
    "select_target_file",
    "FallbackSearch",
    "SearchExecutionResult",
    "SearchPlan",
    "SearchResult",
    "TargetSelection",
]
