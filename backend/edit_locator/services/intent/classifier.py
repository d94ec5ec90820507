"""
Intent classifier - maps a natural-language edit request to an edit type and target files.

Pure pattern matching, no model calls. Pattern groups are scanned in order and
the first regex that matches decides the edit type, so the order of
INTENT_PATTERNS is significant: style phrasings must come before the broader
component phrasings ("make the header blue" is a style edit, not a component edit).
"""
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from edit_locator.services.manifest import ProjectManifest, basename
from edit_locator.services.intent import resolvers

logger = logging.getLogger(__name__)


class EditType(str, Enum):
    """Kinds of edits a prompt can request."""
    UPDATE_COMPONENT = "UPDATE_COMPONENT"
    ADD_FEATURE = "ADD_FEATURE"
    FIX_ISSUE = "FIX_ISSUE"
    UPDATE_STYLE = "UPDATE_STYLE"
    REFACTOR = "REFACTOR"
    FULL_REBUILD = "FULL_REBUILD"
    ADD_DEPENDENCY = "ADD_DEPENDENCY"


@dataclass
class EditIntent:
    """Classified edit request."""
    type: EditType
    target_files: list[str]
    confidence: float               # heuristic score in [0, 1], not a probability
    description: str
    suggested_context: list[str] = field(default_factory=list)


@dataclass
class IntentPattern:
    """One pattern group: phrasings of an edit type and how to find its files."""
    type: EditType
    patterns: list[re.Pattern]
    resolve_files: Callable[[str, ProjectManifest], list[str]]


def _compile(*patterns: str) -> list[re.Pattern]:
    return [re.compile(p, re.IGNORECASE) for p in patterns]


INTENT_PATTERNS: list[IntentPattern] = [
    IntentPattern(
        type=EditType.UPDATE_STYLE,
        patterns=_compile(
            r"update\s+(the\s+)?(\w+)\s+(component|section|page)\s+(style|styling|appearance|color|theme)",
            r"change\s+(the\s+)?(\w+)\s+(background|color|theme|styling)",
            r"make\s+(the\s+)?(\w+)\s+(blue|red|green|dark|light|responsive)",
            r"modify\s+(the\s+)?(\w+)\s+(layout|grid|flex|design)",
            r"update\s+(the\s+)?(\w+)\s+(to\s+)?(be\s+)?responsive",
            # Tailwind class edits
            r"change\s+.*\s+(bg-|text-|border-|p-|m-|flex|grid)",
            r"add\s+(hover|focus|active|transition|animation)\s+effects?",
            r"make\s+.*\s+(mobile|desktop|tablet)\s+(friendly|responsive)",
        ),
        resolve_files=resolvers.find_style_files,
    ),
    IntentPattern(
        type=EditType.UPDATE_COMPONENT,
        patterns=_compile(
            r"update\s+(the\s+)?(\w+)\s+(component|section|page)(?!\s+(style|styling|color|theme))",
            r"change\s+(the\s+)?(\w+)\s+(functionality|behavior|logic)",
            r"modify\s+(the\s+)?(\w+)\s+(props|state|hooks)",
            r"edit\s+(the\s+)?(\w+)(?!\s+(style|color|theme))",
            r"fix\s+(the\s+)?(\w+)\s+(component|logic|functionality)",
            # Text and element removal / replacement
            r"remove\s+.*\s+(button|link|text|element|section|component)",
            r"delete\s+.*\s+(button|link|text|element|section|component)",
            r"hide\s+.*\s+(button|link|text|element|section|component)",
            r"replace\s+.*\s+(text|content|element)",
            r"change\s+.*\s+(text|content|label|title)\s+to",
        ),
        resolve_files=resolvers.find_component_by_content,
    ),
    IntentPattern(
        type=EditType.ADD_FEATURE,
        patterns=_compile(
            r"add\s+(a\s+)?new\s+(\w+)\s+(page|section|feature|component)",
            r"create\s+(a\s+)?(\w+)\s+(page|section|feature|component)",
            r"implement\s+(a\s+)?(\w+)\s+(page|section|feature|component)",
            r"build\s+(a\s+)?(\w+)\s+(page|section|feature|component)",
            r"add\s+(\w+)\s+to\s+(?:the\s+)?(\w+)",
            r"include\s+(?:a\s+)?(\w+)\s+(component|section|feature)",
            # Hooks and state
            r"add\s+(state|useState|useEffect|useMemo|useCallback)",
            r"implement\s+(routing|navigation|form\s+handling)",
            r"create\s+(responsive|mobile|desktop)\s+(layout|design)",
        ),
        resolve_files=resolvers.find_feature_insertion_points,
    ),
    IntentPattern(
        type=EditType.FIX_ISSUE,
        patterns=_compile(
            r"fix\s+(the\s+)?(\w+|\w+\s+\w+)(?!\s+(styling|style|color|theme))",
            r"resolve\s+(the\s+)?(error|issue|bug|problem)",
            r"debug\s+(the\s+)?(\w+)",
            r"repair\s+(the\s+)?(\w+)",
            r"correct\s+(the\s+)?(\w+)",
            # Performance and accessibility
            r"optimize\s+(the\s+)?(\w+)",
            r"improve\s+(performance|accessibility|a11y)",
            r"fix\s+(accessibility|a11y|performance)\s+issues?",
        ),
        resolve_files=resolvers.find_problem_files,
    ),
    IntentPattern(
        type=EditType.REFACTOR,
        patterns=_compile(
            r"refactor\s+(the\s+)?(\w+)",
            r"clean\s+up\s+(the\s+)?(\w+|code)",
            r"reorganize\s+(the\s+)?(\w+)",
            r"restructure\s+(the\s+)?(\w+)",
            r"improve\s+(the\s+)?code\s+quality",
            r"extract\s+(component|hook|utility|function)",
            r"split\s+(the\s+)?(\w+)\s+into\s+smaller",
        ),
        resolve_files=resolvers.find_refactor_targets,
    ),
    IntentPattern(
        type=EditType.FULL_REBUILD,
        patterns=_compile(
            r"start\s+over",
            r"recreate\s+everything",
            r"rebuild\s+(the\s+)?(app|application|entire)",
            r"new\s+(app|application)",
            r"from\s+scratch",
            r"completely\s+redesign",
        ),
        resolve_files=resolvers.find_entry_point,
    ),
    IntentPattern(
        type=EditType.ADD_DEPENDENCY,
        patterns=_compile(
            r"install\s+(\w+)",
            r"add\s+(\w+)\s+(package|library|dependency)",
            r"use\s+(\w+)\s+(library|framework|package)",
            r"integrate\s+(\w+)",
            r"import\s+(\w+)\s+(library|package)",
        ),
        resolve_files=resolvers.find_package_files,
    ),
]

DEFAULT_CONFIDENCE = 0.3
DEFAULT_DESCRIPTION = "General update to application - no specific pattern matched"


def classify_intent(prompt: str, manifest: ProjectManifest) -> EditIntent:
    """
    Classify an edit request against the project manifest.

    Always returns an intent: when no pattern matches the request is treated
    as a generic component update of the entry point.
    """
    for group in INTENT_PATTERNS:
        for regex in group.patterns:
            if not regex.search(prompt):
                continue

            resolved = group.resolve_files(prompt, manifest)
            confidence = calculate_confidence(prompt, regex, resolved)
            target_files = resolved or [manifest.entry_point]

            logger.info(f"[intent] Matched {group.type.value} via /{regex.pattern}/ "
                        f"(confidence={confidence}, files={target_files})")

            return EditIntent(
                type=group.type,
                target_files=target_files,
                confidence=confidence,
                description=generate_description(group.type, target_files),
                suggested_context=get_suggested_context(target_files, manifest),
            )

    logger.info("[intent] No pattern matched, defaulting to UPDATE_COMPONENT")
    target_files = [manifest.entry_point]
    return EditIntent(
        type=EditType.UPDATE_COMPONENT,
        target_files=target_files,
        confidence=DEFAULT_CONFIDENCE,
        description=DEFAULT_DESCRIPTION,
        suggested_context=get_suggested_context(target_files, manifest),
    )


def calculate_confidence(prompt: str, regex: re.Pattern, target_files: list[str]) -> float:
    confidence = 0.5

    if target_files and target_files[0]:
        confidence += 0.2

    # Longer prompts are more specific
    if len(prompt.split()) > 5:
        confidence += 0.1

    if regex.search(prompt):
        confidence += 0.2

    return round(min(confidence, 1.0), 2)


def generate_description(edit_type: EditType, target_files: list[str]) -> str:
    file_names = ", ".join(basename(f) for f in target_files)

    descriptions = {
        EditType.UPDATE_COMPONENT: f"Updating component(s): {file_names}",
        EditType.ADD_FEATURE: f"Adding new feature to: {file_names}",
        EditType.FIX_ISSUE: f"Fixing issue in: {file_names}",
        EditType.UPDATE_STYLE: f"Updating styles in: {file_names}",
        EditType.REFACTOR: f"Refactoring: {file_names}",
        EditType.FULL_REBUILD: "Rebuilding entire application",
        EditType.ADD_DEPENDENCY: "Adding new dependency",
    }
    return descriptions.get(edit_type, f"Editing: {file_names}")


def get_suggested_context(target_files: list[str], manifest: ProjectManifest) -> list[str]:
    """Every manifest file that is not a target."""
    targets = set(target_files)
    return [path for path in manifest.files if path not in targets]
