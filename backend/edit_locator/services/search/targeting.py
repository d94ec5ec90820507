"""
Target selection - choose the single file/line to edit from ranked search results.
"""
import logging
from typing import Optional

from edit_locator.services.search.models import SearchResult, TargetSelection

logger = logging.getLogger(__name__)

COMPONENT_EXTENSIONS = (".jsx", ".tsx")


def _select(result: SearchResult, reason: str) -> TargetSelection:
    logger.debug(f"[target] {result.file_path}:{result.line_number} - {reason}")
    return TargetSelection(
        file_path=result.file_path,
        line_number=result.line_number,
        reason=reason
    )


def _first(results: list[SearchResult], predicate) -> Optional[SearchResult]:
    return next((r for r in results if predicate(r)), None)


def select_target_file(results: list[SearchResult], edit_type: str) -> Optional[TargetSelection]:
    """
    Pick the edit location for an edit type. Results are expected best-first
    (as returned by execute_search_plan); returns None only for no results.
    """
    if not results:
        return None

    if edit_type == "UPDATE_STYLE":
        # Tailwind classes live in the components, not in the CSS files
        style_result = _first(
            results,
            lambda r: r.element_type == "style" and r.file_path.endswith(COMPONENT_EXTENSIONS)
        )
        if style_result:
            return _select(style_result, "Found component with Tailwind classes to update")

        component_result = _first(results, lambda r: r.file_path.endswith(COMPONENT_EXTENSIONS))
        if component_result:
            return _select(component_result, "Found component that likely contains styles to update")

    if edit_type == "REMOVE_ELEMENT" or "DELETE" in edit_type:
        jsx_result = _first(results, lambda r: r.element_type == "jsx")
        if jsx_result:
            return _select(jsx_result, "Found JSX element to remove in component")

        render_result = _first(
            results,
            lambda r: "return" in r.line_content or any("<" in line for line in r.context_after)
        )
        if render_result:
            return _select(render_result, "Found component render method containing element to remove")

    if edit_type == "ADD_FEATURE":
        page_result = _first(results, lambda r: r.component_type == "page")
        if page_result:
            return _select(page_result, "Found page component where feature should be added")

        layout_result = _first(results, lambda r: r.component_type == "layout")
        if layout_result:
            return _select(layout_result, "Found layout component where feature should be added")

    best = results[0]
    component_type = best.component_type or "component"
    element_type = best.element_type or "code"
    return _select(
        best,
        f"Highest confidence match ({best.confidence}) in {component_type} {element_type}"
    )
