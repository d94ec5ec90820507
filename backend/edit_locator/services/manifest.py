"""
Project manifest - snapshot of a React project's files, routes and component graph.

The manifest is built once per request (see services/project.py or the API
schemas) and only read by the intent classifier and resolvers.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class FileType(str, Enum):
    """Role of a file inside the React project."""
    PAGE = "page"
    LAYOUT = "layout"
    COMPONENT = "component"
    HOOK = "hook"
    UTILITY = "utility"


@dataclass
class ComponentInfo:
    """Parsed component metadata for a .jsx/.tsx file."""
    name: str
    child_components: list[str] = field(default_factory=list)


@dataclass
class FileRecord:
    """A single file in the manifest."""
    content: str
    last_modified: float            # Unix timestamp
    type: FileType = FileType.UTILITY
    component_info: Optional[ComponentInfo] = None
    imports: Optional[list[str]] = None

    @property
    def component_name(self) -> Optional[str]:
        if self.component_info is None:
            return None
        return self.component_info.name


@dataclass
class ComponentNode:
    """Edges of one component in the component tree."""
    imports: list[str] = field(default_factory=list)
    imported_by: list[str] = field(default_factory=list)


@dataclass
class RouteEntry:
    path: str
    component: str


@dataclass
class ProjectManifest:
    """Ground truth of the current project state."""
    entry_point: str
    files: dict[str, FileRecord] = field(default_factory=dict)
    style_files: list[str] = field(default_factory=list)   # treated as a set
    component_tree: dict[str, ComponentNode] = field(default_factory=dict)
    routes: list[RouteEntry] = field(default_factory=list)

    def file_contents(self) -> dict[str, str]:
        """Map of path -> content, the input shape of the search engine."""
        return {path: record.content for path, record in self.files.items()}


def basename(path: str) -> str:
    return path.rsplit("/", 1)[-1]
