"""
File resolvers - pick the file(s) an edit should touch, one resolver per edit type.

Every resolver is a pure function (prompt, manifest) -> list of paths. The
component resolvers deliberately return a single file: when several files
match only the first one is kept so an edit stays in one place.
"""
import logging
import re

from edit_locator.services.manifest import ProjectManifest, basename

logger = logging.getLogger(__name__)


# Words stripped before looking for component names in a prompt
STOPWORDS_PATTERN = re.compile(
    r"\b(the|a|an|in|on|to|from|update|change|modify|edit|fix|make)\b",
    re.IGNORECASE
)

# Checked in order when no token names a file directly
UI_ELEMENTS = [
    "header", "footer", "nav", "sidebar", "button", "card", "modal", "hero",
    "banner", "about", "services", "features", "testimonials", "gallery",
    "contact", "team", "pricing",
]

QUOTED_PATTERN = re.compile(r"[\"']([^\"']+)[\"']")
REMOVAL_PATTERN = re.compile(
    r"(?:remove|delete|hide)\s+(?:the\s+)?(.+?)(?:\s+button|\s+link|\s+text|\s+element|\s+section|$)",
    re.IGNORECASE
)
LOCATION_PATTERN = re.compile(r"\b(?:inside|in|to|on)\s+(?:the\s+)?(\w+)", re.IGNORECASE)
PROBLEM_PATTERN = re.compile(r"error|bug|issue|problem|broken|not working", re.IGNORECASE)

ROUTER_MARKERS = ("Route", "createBrowserRouter")
PACKAGE_FILES = ("package.json", "vite.config.js", "tsconfig.json")
RECENT_FILES_LIMIT = 5


def _dedupe(paths: list[str]) -> list[str]:
    return list(dict.fromkeys(paths))


def extract_component_names(prompt: str) -> list[str]:
    """Lowercased prompt tokens (3+ chars) left after dropping edit verbs and articles."""
    cleaned = STOPWORDS_PATTERN.sub("", prompt).lower()
    return [word for word in re.findall(r"\b\w+\b", cleaned) if len(word) > 2]


def extract_content_terms(prompt: str) -> list[str]:
    """
    Literal text the user points at: quoted strings plus the phrase after
    remove/delete/hide (e.g. "remove start deploying button" -> "start deploying").
    """
    terms = [match.strip() for match in QUOTED_PATTERN.findall(prompt)]
    action = REMOVAL_PATTERN.search(prompt)
    if action:
        terms.append(action.group(1).strip().strip("\"'").strip())
    return list(dict.fromkeys(term for term in terms if term))


def find_component_files(prompt: str, manifest: ProjectManifest) -> list[str]:
    """Find the component file named by the prompt, falling back to the entry point."""
    files: list[str] = []
    lower_prompt = prompt.lower()
    words = extract_component_names(prompt)
    logger.debug(f"[resolvers] Component words: {words}")

    for path, record in manifest.files.items():
        file_name = basename(path).lower()
        component_name = (record.component_name or "").lower()
        for word in words:
            if word in file_name or (component_name and word in component_name):
                logger.debug(f"[resolvers] Match: word='{word}' in file='{path}'")
                files.append(path)
                break

    if not files:
        for element in UI_ELEMENTS:
            if element not in lower_prompt:
                continue
            # Exact file name first (header.jsx), then any file name containing it
            for path in manifest.files:
                file_name = basename(path).lower()
                if f"{element}." in file_name or file_name == element:
                    logger.debug(f"[resolvers] UI element match: '{element}' in '{path}'")
                    return [path]
            for path in manifest.files:
                if element in basename(path).lower():
                    logger.debug(f"[resolvers] UI element partial match: '{element}' in '{path}'")
                    return [path]

    if len(files) > 1:
        logger.debug(f"[resolvers] {len(files)} files matched, keeping {files[0]}")
        return [files[0]]

    return files or [manifest.entry_point]


def find_component_by_content(prompt: str, manifest: ProjectManifest) -> list[str]:
    """Find the component whose source contains the text the prompt quotes or removes."""
    terms = extract_content_terms(prompt)
    logger.debug(f"[resolvers] Content terms: {terms}")

    if terms:
        lowered_terms = [term.lower() for term in terms]
        for path, record in manifest.files.items():
            if ".jsx" not in path and ".tsx" not in path:
                continue
            content = record.content.lower()
            if any(term in content for term in lowered_terms):
                logger.debug(f"[resolvers] Content match in {path}")
                return [path]

    logger.debug("[resolvers] No content match, falling back to component names")
    return find_component_files(prompt, manifest)


def find_style_files(prompt: str, manifest: ProjectManifest) -> list[str]:
    files = list(manifest.style_files)
    files.extend(path for path in manifest.files if "tailwind.config" in path)
    files.extend(find_component_files(prompt, manifest))
    return _dedupe(files)


def find_feature_insertion_points(prompt: str, manifest: ProjectManifest) -> list[str]:
    """Find where a new page/section/component should be wired in."""
    files: list[str] = []
    lower_prompt = prompt.lower()

    if "page" in lower_prompt:
        for path, record in manifest.files.items():
            if (any(marker in record.content for marker in ROUTER_MARKERS)
                    or "router" in path or "routes" in path):
                files.append(path)
        if manifest.entry_point:
            files.append(manifest.entry_point)

    if any(word in lower_prompt for word in ("component", "section", "add", "create")):
        location = LOCATION_PATTERN.search(prompt)
        if location:
            parent_files = find_component_files(location.group(1), manifest)
            logger.debug(f"[resolvers] Adding to '{location.group(1)}': {parent_files}")
            files.extend(parent_files)
        else:
            for word in extract_component_names(prompt):
                related = find_component_files(word, manifest)
                if related and related[0] != manifest.entry_point:
                    files.extend(related)
            if not files:
                files.append(manifest.entry_point)

    return _dedupe(files)


def find_problem_files(prompt: str, manifest: ProjectManifest) -> list[str]:
    """Recently modified files on bug language, plus any component the prompt names."""
    files: list[str] = []
    if PROBLEM_PATTERN.search(prompt):
        recent = sorted(
            manifest.files.items(),
            key=lambda item: item[1].last_modified,
            reverse=True
        )[:RECENT_FILES_LIMIT]
        files.extend(path for path, _ in recent)

    files.extend(find_component_files(prompt, manifest))
    return _dedupe(files)


def find_refactor_targets(prompt: str, manifest: ProjectManifest) -> list[str]:
    return find_component_files(prompt, manifest)


def find_entry_point(prompt: str, manifest: ProjectManifest) -> list[str]:
    return [manifest.entry_point]


def find_package_files(prompt: str, manifest: ProjectManifest) -> list[str]:
    return [path for path in manifest.files if path.endswith(PACKAGE_FILES)]
