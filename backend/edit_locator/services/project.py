"""
Project indexing - reads a local React project and builds its manifest.
"""
import logging
import re
from pathlib import Path
from typing import Optional

from edit_locator.services.imports import is_code_file, parse_imports
from edit_locator.services.manifest import (
    ComponentInfo,
    ComponentNode,
    FileRecord,
    FileType,
    ProjectManifest,
    RouteEntry,
    basename,
)

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = (".jsx", ".js", ".tsx", ".ts", ".css", ".scss", ".html", ".json")
EXCLUDE_DIRS = {"node_modules", ".git", "dist", "build", ".venv", "__pycache__", ".backups", ".next"}
STYLE_EXTENSIONS = (".css", ".scss")
ENTRY_CANDIDATES = [
    "src/App.jsx", "src/App.tsx", "src/App.js",
    "src/main.jsx", "src/main.tsx", "src/index.jsx", "src/index.js",
]
DEFAULT_ENTRY_POINT = "src/App.jsx"

COMPONENT_NAME_PATTERNS = [
    re.compile(r"export\s+default\s+function\s+([A-Z]\w*)"),
    re.compile(r"export\s+default\s+class\s+([A-Z]\w*)"),
    re.compile(r"(?:^|\n)\s*(?:export\s+)?function\s+([A-Z]\w*)\s*\("),
    re.compile(r"(?:^|\n)\s*(?:export\s+)?const\s+([A-Z]\w*)\s*=\s*(?:\([^)]*\)|\w+)\s*=>"),
]
JSX_TAG_PATTERN = re.compile(r"<([A-Z][\w.]*)")
ROUTE_PATTERN = re.compile(
    r"""<Route\b[^>]*?\bpath=["']([^"']+)["'][^>]*?\b(?:element=\{\s*<([A-Z]\w*)|component=\{\s*([A-Z]\w*))"""
)
LAYOUT_MARKERS = ("layout", "header", "footer", "sidebar", "nav")


def read_file_content(project_path: Path, relative_path: str) -> str:
    """Read file content from project."""
    file_path = project_path / relative_path
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {relative_path}")
    return file_path.read_text(encoding="utf-8")


def list_project_files(
    project_path: Path,
    extensions: tuple = SOURCE_EXTENSIONS
) -> list[str]:
    """List all relevant source files in a project, relative and '/'-separated."""
    files = []
    for file in project_path.rglob("*"):
        if not file.is_file() or not file.name.endswith(extensions):
            continue
        relative = file.relative_to(project_path)
        # Skip excluded directories
        if any(part in EXCLUDE_DIRS for part in relative.parts[:-1]):
            continue
        files.append(relative.as_posix())

    return sorted(files)


def detect_file_type(path: str) -> FileType:
    name = basename(path)
    directories = path.lower().split("/")[:-1]

    if re.match(r"use[A-Z]", name):
        return FileType.HOOK
    if any(d in directories for d in ("pages", "app", "routes")) or "Page" in name:
        return FileType.PAGE
    if any(marker in name.lower() for marker in LAYOUT_MARKERS):
        return FileType.LAYOUT
    if any(d in directories for d in ("utils", "lib", "helpers")) or not path.endswith((".jsx", ".tsx")):
        return FileType.UTILITY
    return FileType.COMPONENT


def parse_component_info(path: str, content: str) -> Optional[ComponentInfo]:
    """Component name and rendered child components of a .jsx/.tsx file."""
    if not path.endswith((".jsx", ".tsx")):
        return None

    name = None
    for pattern in COMPONENT_NAME_PATTERNS:
        match = pattern.search(content)
        if match:
            name = match.group(1)
            break
    if name is None:
        name = basename(path).split(".", 1)[0]

    children = [tag for tag in dict.fromkeys(JSX_TAG_PATTERN.findall(content)) if tag != name]
    return ComponentInfo(name=name, child_components=children)


def detect_entry_point(files: list[str]) -> str:
    available = set(files)
    for candidate in ENTRY_CANDIDATES:
        if candidate in available:
            return candidate
    code_files = [f for f in files if is_code_file(f)]
    return code_files[0] if code_files else DEFAULT_ENTRY_POINT


def resolve_import(from_file: str, module: str, files: set[str]) -> Optional[str]:
    """Resolve a relative import specifier to a manifest path."""
    if not module.startswith(("./", "../")):
        return None

    parts = from_file.split("/")[:-1]
    for part in module.split("/"):
        if part == "..":
            if parts:
                parts.pop()
        elif part != ".":
            parts.append(part)
    resolved = "/".join(parts)

    for ext in ("", ".jsx", ".js", ".tsx", ".ts"):
        if resolved + ext in files:
            return resolved + ext
        if f"{resolved}/index{ext}" in files:
            return f"{resolved}/index{ext}"
    return None


def build_component_tree(files: dict[str, FileRecord]) -> dict[str, ComponentNode]:
    paths = set(files)
    tree: dict[str, ComponentNode] = {}

    for path, record in files.items():
        if record.component_info is not None:
            tree.setdefault(record.component_info.name, ComponentNode())

    for path, record in files.items():
        if record.component_info is None or not record.imports:
            continue
        parent = record.component_info.name
        for module in record.imports:
            target = resolve_import(path, module, paths)
            if target is None or files[target].component_info is None:
                continue
            child = files[target].component_info.name
            if child not in tree[parent].imports:
                tree[parent].imports.append(child)
            if parent not in tree[child].imported_by:
                tree[child].imported_by.append(parent)

    return tree


def extract_routes(files: dict[str, FileRecord], entry_point: str) -> list[RouteEntry]:
    """<Route path=... element={<X />}> declarations, resolved to the file defining X."""
    by_component = {
        record.component_info.name: path
        for path, record in files.items()
        if record.component_info is not None
    }

    routes = []
    for record in files.values():
        for match in ROUTE_PATTERN.finditer(record.content):
            component = match.group(2) or match.group(3)
            routes.append(RouteEntry(
                path=match.group(1),
                component=by_component.get(component, entry_point)
            ))
    return routes


def build_manifest(project_path: Path) -> ProjectManifest:
    """Index a project directory into a manifest."""
    paths = list_project_files(project_path)
    files: dict[str, FileRecord] = {}

    for path in paths:
        try:
            content = read_file_content(project_path, path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            continue

        imports = None
        if is_code_file(path):
            imports = [imp.module for imp in parse_imports(content).imports]

        files[path] = FileRecord(
            content=content,
            last_modified=(project_path / path).stat().st_mtime,
            type=detect_file_type(path),
            component_info=parse_component_info(path, content),
            imports=imports
        )

    entry_point = detect_entry_point(list(files))
    manifest = ProjectManifest(
        entry_point=entry_point,
        files=files,
        style_files=[p for p in files if p.endswith(STYLE_EXTENSIONS)],
        component_tree=build_component_tree(files),
        routes=extract_routes(files, entry_point),
    )

    logger.info(f"Indexed {len(files)} files from {project_path} (entry={entry_point}, "
                f"routes={len(manifest.routes)})")
    return manifest
