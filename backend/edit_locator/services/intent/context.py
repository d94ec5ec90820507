"""
Edit context selection - which files to edit, which to show as reference, and the editing brief.
"""
import json
import logging
from dataclasses import dataclass

from edit_locator.prompts import EDIT_BRIEF_TEMPLATE, EDIT_INSTRUCTIONS
from edit_locator.services.imports import is_code_file, suggest_missing_dependencies
from edit_locator.services.intent.classifier import EditIntent, EditType, classify_intent
from edit_locator.services.manifest import ProjectManifest, basename

logger = logging.getLogger(__name__)

MAX_LISTED_COMPONENTS = 10


@dataclass
class FileContext:
    """Files to edit, files to include for reference, and the brief for the editing model."""
    primary_files: list[str]
    context_files: list[str]
    edit_intent: EditIntent
    instruction: str


def _find_key_files(all_files: list[str], primary: set[str]) -> list[str]:
    """Architectural files that always go first in the context."""
    finders = [
        lambda f: f.lower().endswith(("app.jsx", "app.tsx")),
        lambda f: "layout" in f.lower(),
        lambda f: f.endswith(("tailwind.config.js", "tailwind.config.ts",
                              "tailwind.config.mjs", "tailwind.config.cjs")),
        lambda f: f.endswith(("index.css", "globals.css", "main.css", "app.css")),
        lambda f: f.endswith("package.json"),
        lambda f: f.endswith(("tsconfig.json", "jsconfig.json")),
    ]

    key_files: list[str] = []
    for matches in finders:
        found = next((f for f in all_files if matches(f)), None)
        if found and found not in primary and found not in key_files:
            key_files.append(found)
    return key_files


def prioritize_context_files(context_files: list[str]) -> dict[str, list[str]]:
    """Group context paths into architecture, styling and components."""
    groups: dict[str, list[str]] = {"architecture": [], "styling": [], "components": []}

    for file in context_files:
        name = file.lower()
        if any(m in name for m in ("app.", "layout", "package.json", "config", "tsconfig", "index.html")):
            groups["architecture"].append(file)
        elif any(m in name for m in ("css", "tailwind", "style", "theme")):
            groups["styling"].append(file)
        else:
            groups["components"].append(file)

    return groups


def find_missing_dependencies(manifest: ProjectManifest) -> list[str]:
    """Packages imported by the project's code but absent from package.json."""
    package_json = manifest.files.get("package.json")
    if package_json is None:
        return []

    try:
        package = json.loads(package_json.content)
    except ValueError as e:
        logger.warning(f"[context] Could not parse package.json: {e}")
        return []

    specified = list(package.get("dependencies", {})) + list(package.get("devDependencies", {}))
    missing: list[str] = []
    for path, record in manifest.files.items():
        if is_code_file(path):
            missing.extend(suggest_missing_dependencies(record.content, specified))
    return sorted(set(missing))


def _bullets(paths: list[str]) -> str:
    return "\n".join(f"- {p}" for p in paths) or "- (none)"


def build_edit_brief(
    prompt: str,
    intent: EditIntent,
    primary_files: list[str],
    context_files: list[str],
    manifest: ProjectManifest
) -> str:
    primary_lines = []
    for path in primary_files:
        record = manifest.files.get(path)
        name = (record.component_name if record else None) or basename(path)
        file_type = record.type.value if record else "unknown"
        primary_lines.append(f"- {path} ({name}, type: {file_type})")

    groups = prioritize_context_files(context_files)
    components = groups["components"][:MAX_LISTED_COMPONENTS]
    component_list = _bullets(components)
    if len(groups["components"]) > MAX_LISTED_COMPONENTS:
        component_list += f"\n... and {len(groups['components']) - MAX_LISTED_COMPONENTS} more components"

    instructions = EDIT_INSTRUCTIONS.get(intent.type.value, "")
    if intent.type == EditType.ADD_DEPENDENCY:
        missing = find_missing_dependencies(manifest)
        if missing:
            instructions += f"\n- Already imported but missing from package.json: {', '.join(missing)}"

    return EDIT_BRIEF_TEMPLATE.format(
        edit_type=intent.type.value,
        description=intent.description,
        confidence=round(intent.confidence * 100),
        prompt=prompt,
        entry_point=manifest.entry_point,
        primary_files="\n".join(primary_lines) or "- (none)",
        architecture=_bullets(groups["architecture"]),
        styling=_bullets(groups["styling"]),
        components=component_list,
        instructions=instructions,
    )


def select_files_for_edit(prompt: str, manifest: ProjectManifest) -> FileContext:
    """
    Classify the prompt and split the project into files to edit and
    reference files, key architectural files first.
    """
    intent = classify_intent(prompt, manifest)
    primary_files = intent.target_files
    primary = set(primary_files)

    all_files = list(manifest.files)
    key_files = _find_key_files(all_files, primary)
    rest = [f for f in all_files if f not in primary and f not in key_files]
    context_files = key_files + rest

    logger.info(f"[context] primary={primary_files}, key={key_files}, "
                f"context={len(context_files)} files")

    return FileContext(
        primary_files=primary_files,
        context_files=context_files,
        edit_intent=intent,
        instruction=build_edit_brief(prompt, intent, primary_files, context_files, manifest),
    )
