from typing import Optional

from pydantic import BaseModel, Field

from edit_locator.services.intent.classifier import EditIntent, EditType
from edit_locator.services.manifest import (
    ComponentInfo,
    ComponentNode,
    FileRecord,
    FileType,
    ProjectManifest,
    RouteEntry,
)
from edit_locator.services.search.models import (
    DEFAULT_FILE_TYPES,
    FallbackSearch,
    SearchExecutionResult,
    SearchPlan,
    SearchResult,
    TargetSelection,
)


# =============================================================================
# Manifest
# =============================================================================

class ComponentInfoModel(BaseModel):
    name: str
    child_components: list[str] = Field(default_factory=list)


class FileRecordModel(BaseModel):
    """A single file of the project snapshot."""
    content: str = ""
    last_modified: float = 0
    type: FileType = FileType.UTILITY
    component_info: Optional[ComponentInfoModel] = None
    imports: Optional[list[str]] = None


class ComponentNodeModel(BaseModel):
    imports: list[str] = Field(default_factory=list)
    imported_by: list[str] = Field(default_factory=list)


class RouteModel(BaseModel):
    path: str
    component: str


class ManifestModel(BaseModel):
    """Snapshot of a React project: files, styles, component graph and routes."""
    entry_point: str = Field(..., description="Root file of the application, e.g. 'src/App.jsx'")
    files: dict[str, FileRecordModel] = Field(default_factory=dict)
    style_files: list[str] = Field(default_factory=list)
    component_tree: dict[str, ComponentNodeModel] = Field(default_factory=dict)
    routes: list[RouteModel] = Field(default_factory=list)

    def to_manifest(self) -> ProjectManifest:
        files = {}
        for path, record in self.files.items():
            component_info = None
            if record.component_info is not None:
                component_info = ComponentInfo(
                    name=record.component_info.name,
                    child_components=list(record.component_info.child_components)
                )
            files[path] = FileRecord(
                content=record.content,
                last_modified=record.last_modified,
                type=record.type,
                component_info=component_info,
                imports=list(record.imports) if record.imports is not None else None
            )

        return ProjectManifest(
            entry_point=self.entry_point,
            files=files,
            style_files=list(self.style_files),
            component_tree={
                name: ComponentNode(imports=list(node.imports), imported_by=list(node.imported_by))
                for name, node in self.component_tree.items()
            },
            routes=[RouteEntry(path=r.path, component=r.component) for r in self.routes]
        )


# =============================================================================
# Intent
# =============================================================================

class IntentRequest(BaseModel):
    """Request to classify an edit prompt against a project manifest."""
    prompt: str = Field(
        ...,
        description="Natural language edit request",
        max_length=4000
    )
    manifest: ManifestModel


class IntentInfo(BaseModel):
    """Classified edit intent."""
    type: EditType
    target_files: list[str]
    confidence: float
    description: str
    suggested_context: list[str] = Field(default_factory=list)

    @classmethod
    def from_intent(cls, intent: EditIntent) -> "IntentInfo":
        return cls(
            type=intent.type,
            target_files=intent.target_files,
            confidence=intent.confidence,
            description=intent.description,
            suggested_context=intent.suggested_context
        )


class FileContextResponse(BaseModel):
    primary_files: list[str]
    context_files: list[str]
    intent: IntentInfo
    instruction: str


# =============================================================================
# Search
# =============================================================================

class FallbackSearchModel(BaseModel):
    terms: list[str] = Field(default_factory=list)
    patterns: Optional[list[str]] = None


class SearchPlanModel(BaseModel):
    """Terms and patterns describing where to look for the edit target."""
    search_terms: list[str] = Field(default_factory=list, description="Case-insensitive literal terms")
    regex_patterns: Optional[list[str]] = Field(default=None, description="Per-line regex patterns")
    file_types_to_search: list[str] = Field(default_factory=lambda: list(DEFAULT_FILE_TYPES))
    priority_files: Optional[list[str]] = None
    exclude_files: Optional[list[str]] = None
    fallback_search: Optional[FallbackSearchModel] = None
    edit_type: Optional[str] = None
    reasoning: str = ""
    expected_matches: int = Field(default=1, ge=1, le=10)

    def to_plan(self) -> SearchPlan:
        fallback = None
        if self.fallback_search is not None:
            fallback = FallbackSearch(
                terms=list(self.fallback_search.terms),
                patterns=self.fallback_search.patterns
            )
        return SearchPlan(
            search_terms=list(self.search_terms),
            regex_patterns=self.regex_patterns,
            file_types_to_search=list(self.file_types_to_search),
            priority_files=self.priority_files,
            exclude_files=self.exclude_files,
            fallback_search=fallback,
            edit_type=self.edit_type,
            reasoning=self.reasoning,
            expected_matches=self.expected_matches
        )

    @classmethod
    def from_plan(cls, plan: SearchPlan) -> "SearchPlanModel":
        fallback = None
        if plan.fallback_search is not None:
            fallback = FallbackSearchModel(
                terms=plan.fallback_search.terms,
                patterns=plan.fallback_search.patterns
            )
        return cls(
            search_terms=plan.search_terms,
            regex_patterns=plan.regex_patterns,
            file_types_to_search=plan.file_types_to_search,
            priority_files=plan.priority_files,
            exclude_files=plan.exclude_files,
            fallback_search=fallback,
            edit_type=plan.edit_type,
            reasoning=plan.reasoning,
            expected_matches=max(1, min(plan.expected_matches, 10))
        )


class SearchResultModel(BaseModel):
    file_path: str
    line_number: int
    line_content: str
    confidence: str
    matched_term: Optional[str] = None
    matched_pattern: Optional[str] = None
    context_before: list[str] = Field(default_factory=list)
    context_after: list[str] = Field(default_factory=list)
    component_type: Optional[str] = None
    element_type: Optional[str] = None

    def to_result(self) -> SearchResult:
        return SearchResult(**self.model_dump())

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultModel":
        return cls(
            file_path=result.file_path,
            line_number=result.line_number,
            line_content=result.line_content,
            confidence=result.confidence,
            matched_term=result.matched_term,
            matched_pattern=result.matched_pattern,
            context_before=result.context_before,
            context_after=result.context_after,
            component_type=result.component_type,
            element_type=result.element_type
        )


class SearchRequest(BaseModel):
    """Request to execute a search plan over file contents."""
    plan: SearchPlanModel
    files: dict[str, str] = Field(..., description="Map of file path to file content")
    include_report: bool = Field(default=False, description="Include a plain-text report of the results")


class SearchResponse(BaseModel):
    success: bool
    results: list[SearchResultModel] = Field(default_factory=list)
    files_searched: int = 0
    execution_time_ms: int = 0
    used_fallback: bool = False
    search_type: str = "exact"
    error: Optional[str] = None
    report: Optional[str] = None

    @classmethod
    def from_execution(cls, execution: SearchExecutionResult, report: Optional[str] = None) -> "SearchResponse":
        return cls(
            success=execution.success,
            results=[SearchResultModel.from_result(r) for r in execution.results],
            files_searched=execution.files_searched,
            execution_time_ms=execution.execution_time_ms,
            used_fallback=execution.used_fallback,
            search_type=execution.search_type,
            error=execution.error,
            report=report
        )


class SelectTargetRequest(BaseModel):
    results: list[SearchResultModel]
    edit_type: str = Field(..., description="Edit type, e.g. UPDATE_STYLE or REMOVE_ELEMENT")


class TargetInfo(BaseModel):
    file_path: str
    line_number: int
    reason: str

    @classmethod
    def from_selection(cls, selection: TargetSelection) -> "TargetInfo":
        return cls(
            file_path=selection.file_path,
            line_number=selection.line_number,
            reason=selection.reason
        )


class SearchPlanRequest(BaseModel):
    prompt: str = Field(..., min_length=1, max_length=4000)
    manifest: ManifestModel
    use_llm: bool = Field(default=False, description="Ask the LLM for the plan instead of the heuristic builder")


# =============================================================================
# Locate pipeline
# =============================================================================

class LocateRequest(BaseModel):
    """Request to locate the edit target for an instruction."""
    instruction: str = Field(
        ...,
        description="Natural language instruction describing the desired change",
        min_length=1,
        max_length=4000
    )
    project: Optional[str] = Field(
        default=None,
        description="Project name under the projects directory (e.g. '1-todo-app')"
    )
    manifest: Optional[ManifestModel] = Field(
        default=None,
        description="Inline manifest, used when no project name is given"
    )
    use_llm_plan: Optional[bool] = None


class LocateStepInfo(BaseModel):
    """Information about a single pipeline step."""
    name: str
    status: str
    duration_ms: int
    details: dict = Field(default_factory=dict)


class LocateResponse(BaseModel):
    success: bool = Field(..., description="Whether an edit target was found")
    target: Optional[TargetInfo] = None
    message: str = Field(default="")
    total_duration_ms: int = 0

    # Verbose only
    intent: Optional[IntentInfo] = None
    plan: Optional[SearchPlanModel] = None
    search: Optional[SearchResponse] = None
    trace: list[LocateStepInfo] = Field(default_factory=list)
