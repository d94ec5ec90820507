"""Pytest configuration and fixtures for edit locator tests."""

from types import SimpleNamespace
from typing import Callable

import pytest

from edit_locator.services.manifest import (
    ComponentInfo,
    FileRecord,
    FileType,
    ProjectManifest,
)


APP_JSX = """import Header from './components/Header'
import Hero from './components/Hero'
import Footer from './components/Footer'

export default function App() {
  return (
    <div className="min-h-screen">
      <Header />
      <Hero />
      <Footer />
    </div>
  )
}
"""

HEADER_JSX = """export default function Header() {
  return (
    <header className="bg-white shadow">
      <nav className="flex gap-4">
        <a href="/">Home</a>
      </nav>
    </header>
  )
}
"""

HERO_JSX = """export default function Hero() {
  return (
    <section className="py-20">
      <h1 className="text-4xl font-bold">Ship faster</h1>
      <button className="px-4 py-2 rounded">Start Deploying</button>
    </section>
  )
}
"""

FOOTER_JSX = """export default function Footer() {
  return <footer className="py-8">(c) 2024 Acme</footer>
}
"""

SAMPLE_FILES = {
    "src/App.jsx": APP_JSX,
    "src/components/Header.jsx": HEADER_JSX,
    "src/components/Hero.jsx": HERO_JSX,
    "src/components/Footer.jsx": FOOTER_JSX,
    "src/index.css": "@tailwind base;\n@tailwind components;\n",
    "tailwind.config.js": "module.exports = { content: ['./src/**/*.jsx'] }\n",
    "package.json": '{"name": "demo", "dependencies": {"react": "^18.2.0"}}\n',
}

FILE_TYPES = {
    "src/App.jsx": FileType.COMPONENT,
    "src/components/Header.jsx": FileType.LAYOUT,
    "src/components/Hero.jsx": FileType.COMPONENT,
    "src/components/Footer.jsx": FileType.LAYOUT,
}


def _component_name(path: str) -> str:
    return path.rsplit("/", 1)[-1].split(".", 1)[0]


def build_test_manifest(
    files: dict[str, str],
    entry_point: str = "src/App.jsx",
    style_files: list[str] = None,
    last_modified: dict[str, float] = None
) -> ProjectManifest:
    """Manifest from {path: content}; .jsx files get component info named after the file."""
    last_modified = last_modified or {}
    records = {}
    for index, (path, content) in enumerate(files.items()):
        component_info = None
        if path.endswith((".jsx", ".tsx")):
            component_info = ComponentInfo(name=_component_name(path))
        records[path] = FileRecord(
            content=content,
            last_modified=last_modified.get(path, 1_700_000_000 + index),
            type=FILE_TYPES.get(path, FileType.UTILITY),
            component_info=component_info,
        )

    if style_files is None:
        style_files = [p for p in files if p.endswith(".css")]

    return ProjectManifest(entry_point=entry_point, files=records, style_files=style_files)


@pytest.fixture
def sample_files() -> dict[str, str]:
    return dict(SAMPLE_FILES)


@pytest.fixture
def sample_manifest() -> ProjectManifest:
    """A small Vite + Tailwind landing page project."""
    return build_test_manifest(SAMPLE_FILES)


@pytest.fixture
def make_manifest() -> Callable[..., ProjectManifest]:
    return build_test_manifest


@pytest.fixture
def stub_llm(monkeypatch):
    """Replace the search-plan LLM client with a canned response.

    Returns a setter: stub_llm('{"search_terms": [...]}') makes every
    chat completion return that content. Calls are recorded on .calls.
    """
    calls = []

    def install(content: str):
        class _StubCompletions:
            async def create(self, **kwargs):
                calls.append(kwargs)
                message = SimpleNamespace(content=content)
                return SimpleNamespace(
                    choices=[SimpleNamespace(message=message)],
                    usage=SimpleNamespace(total_tokens=42)
                )

        class _StubClient:
            def __init__(self, **kwargs):
                self.chat = SimpleNamespace(completions=_StubCompletions())

        monkeypatch.setattr("edit_locator.services.search.planner.AsyncOpenAI", _StubClient)
        return calls

    install.calls = calls
    return install
