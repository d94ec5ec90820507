"""Tests for prompt → edit intent classification."""

import pytest

from edit_locator.services.intent import EditType, classify_intent
from edit_locator.services.intent.classifier import INTENT_PATTERNS, DEFAULT_DESCRIPTION


def test_style_language_wins_over_component_language(sample_manifest):
    """'make the header blue' is a style edit even though it names a component."""
    intent = classify_intent("make the header blue", sample_manifest)

    assert intent.type == EditType.UPDATE_STYLE
    assert "src/components/Header.jsx" in intent.target_files


def test_style_targets_include_stylesheets_and_tailwind_config(sample_manifest):
    intent = classify_intent("change the hero background", sample_manifest)

    assert intent.type == EditType.UPDATE_STYLE
    assert intent.target_files[:2] == ["src/index.css", "tailwind.config.js"]
    assert "src/components/Hero.jsx" in intent.target_files
    assert len(intent.target_files) == len(set(intent.target_files))


def test_remove_button_resolves_file_by_content(sample_manifest):
    intent = classify_intent("remove start deploying button", sample_manifest)

    assert intent.type == EditType.UPDATE_COMPONENT
    assert intent.target_files == ["src/components/Hero.jsx"]
    assert intent.description == "Updating component(s): Hero.jsx"


def test_quoted_text_resolves_file_by_content(sample_manifest):
    intent = classify_intent('change "Ship faster" text to "Ship now"', sample_manifest)

    assert intent.type == EditType.UPDATE_COMPONENT
    assert intent.target_files == ["src/components/Hero.jsx"]


def test_edit_component_by_name(sample_manifest):
    intent = classify_intent("edit the footer", sample_manifest)

    assert intent.type == EditType.UPDATE_COMPONENT
    assert intent.target_files == ["src/components/Footer.jsx"]


def test_add_page_without_router_targets_entry_point(sample_manifest):
    intent = classify_intent("add a videos page", sample_manifest)

    assert "src/App.jsx" in intent.target_files


def test_create_page_is_feature_on_entry_point(sample_manifest):
    intent = classify_intent("create a videos page", sample_manifest)

    assert intent.type == EditType.ADD_FEATURE
    assert intent.target_files == ["src/App.jsx"]
    assert intent.description == "Adding new feature to: App.jsx"


def test_fix_issue_includes_recent_files(sample_manifest):
    intent = classify_intent("resolve the error in the footer", sample_manifest)

    assert intent.type == EditType.FIX_ISSUE
    # five most recently modified files, newest first
    assert intent.target_files[0] == "package.json"
    assert "src/components/Footer.jsx" in intent.target_files
    assert len(intent.target_files) == 5


def test_refactor_targets_named_component(sample_manifest):
    intent = classify_intent("refactor the header", sample_manifest)

    assert intent.type == EditType.REFACTOR
    assert intent.target_files == ["src/components/Header.jsx"]


def test_full_rebuild_targets_entry_point(sample_manifest):
    intent = classify_intent("start over from scratch", sample_manifest)

    assert intent.type == EditType.FULL_REBUILD
    assert intent.target_files == ["src/App.jsx"]
    assert intent.description == "Rebuilding entire application"


def test_dependency_targets_package_files(sample_manifest):
    intent = classify_intent("install axios", sample_manifest)

    assert intent.type == EditType.ADD_DEPENDENCY
    assert intent.target_files == ["package.json"]
    assert intent.confidence == pytest.approx(0.9)


def test_dependency_without_package_files_falls_back_to_entry_point(make_manifest):
    manifest = make_manifest({"src/App.jsx": "export default function App() {}"})
    intent = classify_intent("install axios", manifest)

    assert intent.type == EditType.ADD_DEPENDENCY
    assert intent.target_files == ["src/App.jsx"]
    # no resolved files, so no file bonus
    assert intent.confidence == pytest.approx(0.7)


def test_unmatched_prompt_defaults_to_component_update(sample_manifest):
    intent = classify_intent("hello there", sample_manifest)

    assert intent.type == EditType.UPDATE_COMPONENT
    assert intent.target_files == ["src/App.jsx"]
    assert intent.confidence == pytest.approx(0.3)
    assert intent.description == DEFAULT_DESCRIPTION


def test_empty_prompt_and_empty_manifest(make_manifest):
    manifest = make_manifest({})
    intent = classify_intent("", manifest)

    assert intent.type == EditType.UPDATE_COMPONENT
    assert intent.target_files == ["src/App.jsx"]
    assert intent.suggested_context == []


def test_confidence_builds_up_and_caps(sample_manifest):
    short = classify_intent("make the header blue", sample_manifest)
    long = classify_intent("please make the header blue on every page", sample_manifest)

    assert short.confidence == pytest.approx(0.9)
    assert long.confidence == pytest.approx(1.0)
    assert 0.0 <= long.confidence <= 1.0


def test_suggested_context_is_every_other_file(sample_manifest):
    intent = classify_intent("remove start deploying button", sample_manifest)

    assert set(intent.suggested_context) == set(sample_manifest.files) - {"src/components/Hero.jsx"}
    assert "src/components/Hero.jsx" not in intent.suggested_context


def test_classification_is_idempotent(sample_manifest):
    prompt = "make the header blue"
    assert classify_intent(prompt, sample_manifest) == classify_intent(prompt, sample_manifest)


@pytest.mark.parametrize("prompt", [
    "make the header blue",
    "remove start deploying button",
    "add a videos page",
    "fix the login bug",
    "clean up the code",
    "integrate stripe",
    "",
    "???",
])
def test_always_one_type_and_non_empty_targets(sample_manifest, prompt):
    intent = classify_intent(prompt, sample_manifest)

    assert intent.type in set(EditType)
    assert intent.target_files
    assert all(intent.target_files)


def test_pattern_groups_are_in_priority_order():
    assert [group.type for group in INTENT_PATTERNS] == [
        EditType.UPDATE_STYLE,
        EditType.UPDATE_COMPONENT,
        EditType.ADD_FEATURE,
        EditType.FIX_ISSUE,
        EditType.REFACTOR,
        EditType.FULL_REBUILD,
        EditType.ADD_DEPENDENCY,
    ]
