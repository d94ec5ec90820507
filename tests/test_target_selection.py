"""Tests for target selection and the plain-text results report."""

from edit_locator.services.search import (
    SearchPlan,
    SearchResult,
    execute_search_plan,
    format_search_results,
    select_target_file,
)
from edit_locator.services.search.formatting import NO_RESULTS


def make_result(file_path, line_number=1, line_content="", confidence="high",
                component_type="component", element_type=None, context_after=None):
    return SearchResult(
        file_path=file_path,
        line_number=line_number,
        line_content=line_content,
        confidence=confidence,
        matched_term="x",
        context_after=context_after or [],
        component_type=component_type,
        element_type=element_type,
    )


def test_no_results_selects_nothing():
    assert select_target_file([], "UPDATE_STYLE") is None


def test_style_edit_prefers_component_with_classes():
    results = [
        make_result("src/index.css", 3, component_type="utility", element_type="style"),
        make_result("src/components/Hero.jsx", 4, element_type="style"),
    ]

    target = select_target_file(results, "UPDATE_STYLE")

    assert target.file_path == "src/components/Hero.jsx"
    assert target.line_number == 4
    assert target.reason == "Found component with Tailwind classes to update"


def test_style_edit_falls_back_to_any_component_file():
    results = [
        make_result("src/index.css", 3, component_type="utility", element_type="style"),
        make_result("src/components/Hero.jsx", 7, element_type="jsx"),
    ]

    target = select_target_file(results, "UPDATE_STYLE")

    assert target.file_path == "src/components/Hero.jsx"
    assert target.reason == "Found component that likely contains styles to update"


def test_style_edit_without_component_files_uses_best_result():
    results = [make_result("src/index.css", 3, component_type="utility", element_type="style")]

    target = select_target_file(results, "UPDATE_STYLE")

    assert target.file_path == "src/index.css"
    assert target.reason == "Highest confidence match (high) in utility style"


def test_removal_prefers_jsx_line():
    results = [
        make_result("src/components/Hero.jsx", 2, element_type="function"),
        make_result("src/components/Hero.jsx", 5, element_type="jsx"),
    ]

    target = select_target_file(results, "REMOVE_ELEMENT")

    assert target.line_number == 5
    assert target.reason == "Found JSX element to remove in component"


def test_removal_falls_back_to_render_method():
    results = [
        make_result("src/components/Hero.jsx", 1, "import x from 'y'", element_type="import"),
        make_result("src/components/Hero.jsx", 2, "return (", element_type="function"),
    ]

    target = select_target_file(results, "DELETE_ELEMENT")

    assert target.line_number == 2
    assert target.reason == "Found component render method containing element to remove"


def test_feature_prefers_page_then_layout():
    page = make_result("src/pages/Home.jsx", 3, component_type="page")
    layout = make_result("src/components/Layout.jsx", 8, component_type="layout")
    component = make_result("src/components/Card.jsx", 1)

    assert select_target_file([component, layout, page], "ADD_FEATURE").file_path == "src/pages/Home.jsx"

    target = select_target_file([component, layout], "ADD_FEATURE")
    assert target.file_path == "src/components/Layout.jsx"
    assert target.reason == "Found layout component where feature should be added"


def test_default_selection_is_first_result():
    results = [
        make_result("src/components/Header.jsx", 3, component_type="layout", element_type="jsx"),
        make_result("src/components/Hero.jsx", 5, confidence="medium"),
    ]

    target = select_target_file(results, "UPDATE_COMPONENT")

    assert target.file_path == "src/components/Header.jsx"
    assert target.reason == "Highest confidence match (high) in layout jsx"


def test_default_reason_without_types():
    result = make_result("src/lib/x.js", 1, component_type=None)

    target = select_target_file([result], "REFACTOR")

    assert target.reason == "Highest confidence match (high) in component code"


def test_format_empty_results():
    assert format_search_results([]) == NO_RESULTS


def test_format_results_report(sample_files):
    execution = execute_search_plan(SearchPlan(search_terms=["start deploying"]), sample_files)

    report = format_search_results(execution.results)

    assert report.startswith("SEARCH RESULTS - TARGET LOCATIONS:")
    assert "COMPONENT: src/components/Hero.jsx" in report
    assert "Line 5 (MEDIUM confidence) - JSX ELEMENT" in report
    assert 'Matched term: "start deploying"' in report
    assert "RECOMMENDED EDIT ACTION:" in report
    assert "Edit JSX in src/components/Hero.jsx at line 5" in report
