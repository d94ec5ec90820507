"""Tests for edit context selection and the editing brief."""

from edit_locator.services.intent import EditType, select_files_for_edit
from edit_locator.services.intent.context import find_missing_dependencies, prioritize_context_files


def test_select_files_for_style_edit(sample_manifest):
    context = select_files_for_edit("make the header blue", sample_manifest)

    assert context.edit_intent.type == EditType.UPDATE_STYLE
    assert context.primary_files == ["src/index.css", "tailwind.config.js", "src/components/Header.jsx"]
    # key architectural files first, then everything else
    assert context.context_files == [
        "src/App.jsx",
        "package.json",
        "src/components/Hero.jsx",
        "src/components/Footer.jsx",
    ]
    assert not set(context.primary_files) & set(context.context_files)


def test_edit_brief(sample_manifest):
    context = select_files_for_edit("make the header blue", sample_manifest)

    assert "Type: UPDATE_STYLE" in context.instruction
    assert "Confidence: 90%" in context.instruction
    assert 'User request: "make the header blue"' in context.instruction
    assert "- src/components/Header.jsx (Header, type: layout)" in context.instruction
    assert "Change ONLY the style classes mentioned" in context.instruction


def test_prioritize_context_files():
    groups = prioritize_context_files([
        "src/index.css",
        "tailwind.config.js",
        "src/App.jsx",
        "src/components/Card.jsx",
        "src/styles/theme.js",
    ])

    assert groups == {
        "architecture": ["tailwind.config.js", "src/App.jsx"],
        "styling": ["src/index.css", "src/styles/theme.js"],
        "components": ["src/components/Card.jsx"],
    }


def test_brief_truncates_long_component_lists(make_manifest):
    files = {"src/App.jsx": "export default function App() {}"}
    files.update({f"src/components/C{i}.jsx": f"export default function C{i}() {{}}" for i in range(12)})
    manifest = make_manifest(files)

    context = select_files_for_edit("hello there", manifest)

    assert context.primary_files == ["src/App.jsx"]
    assert len(context.context_files) == 12
    assert "... and 2 more components" in context.instruction


def test_dependency_brief_lists_imported_packages_missing_from_package_json(make_manifest):
    manifest = make_manifest({
        "package.json": '{"dependencies": {"react": "^18.2.0"}, "devDependencies": {"vite": "^5.0.0"}}',
        "src/App.jsx": "import React from 'react'\nimport { motion } from 'framer-motion'\n",
        "src/utils/api.js": "const axios = require('axios')\n",
        "src/index.css": "@import 'tailwindcss';\n",
    })

    assert find_missing_dependencies(manifest) == ["axios", "framer-motion"]

    context = select_files_for_edit("install axios", manifest)

    assert context.edit_intent.type == EditType.ADD_DEPENDENCY
    assert "- Already imported but missing from package.json: axios, framer-motion" in context.instruction


def test_missing_dependencies_without_usable_package_json(make_manifest, sample_manifest):
    broken = make_manifest({"package.json": "{not json", "src/App.jsx": "import x from 'lodash'"})

    assert find_missing_dependencies(broken) == []
    assert find_missing_dependencies(make_manifest({"src/App.jsx": "import x from 'lodash'"})) == []
    # the sample project only imports local files
    assert find_missing_dependencies(sample_manifest) == []
