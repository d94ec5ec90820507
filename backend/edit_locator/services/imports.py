"""
Import statement parser for JS/TS sources.
Separates local (relative) imports from npm package imports.
"""
import re
from dataclasses import dataclass, field
from typing import Optional

IMPORT_PATTERNS = [
    # import React from 'react' / import { x } from 'y' / import type { T } from 'z'
    re.compile(r"""import\s+(?:type\s+)?(?:[\w*{},\s]+)\s+from\s+['"]([^'"]+)['"]"""),
    # import './styles.css'
    re.compile(r"""import\s+['"]([^'"]+)['"]"""),
    # require('x')
    re.compile(r"""require\s*\(\s*['"]([^'"]+)['"]\s*\)"""),
    # import('x')
    re.compile(r"""import\s*\(\s*['"]([^'"]+)['"]\s*\)"""),
]

BUILTIN_MODULES = {
    "assert", "buffer", "child_process", "cluster", "crypto", "dgram",
    "dns", "domain", "events", "fs", "http", "https", "net", "os",
    "path", "punycode", "querystring", "readline", "stream", "string_decoder",
    "timers", "tls", "tty", "url", "util", "v8", "vm", "zlib",
    "perf_hooks", "async_hooks", "http2", "inspector", "worker_threads",
    "diagnostics_channel", "trace_events",
}

CODE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs")


@dataclass
class ParsedImport:
    statement: str
    module: str
    is_relative: bool
    is_package: bool
    package_name: Optional[str] = None


@dataclass
class ImportParseResult:
    imports: list[ParsedImport] = field(default_factory=list)
    required_packages: list[str] = field(default_factory=list)


def extract_package_name(module_path: str) -> str:
    """'react/jsx-runtime' -> 'react', '@radix-ui/react-dialog/x' -> '@radix-ui/react-dialog'."""
    parts = module_path.split("/")
    if module_path.startswith("@") and len(parts) >= 2:
        return f"{parts[0]}/{parts[1]}"
    return parts[0]


def is_relative_import(module_path: str) -> bool:
    return module_path.startswith(("./", "../", "/"))


def is_builtin_module(module_path: str) -> bool:
    return module_path.startswith("node:") or module_path.split("/")[0] in BUILTIN_MODULES


def is_code_file(path: str) -> bool:
    return path.endswith(CODE_EXTENSIONS)


def parse_imports(code: str) -> ImportParseResult:
    """Find every imported module in the source, once each."""
    imports: list[ParsedImport] = []
    packages: set[str] = set()
    seen: set[str] = set()

    for pattern in IMPORT_PATTERNS:
        for match in pattern.finditer(code):
            module = match.group(1)
            if module in seen:
                continue
            seen.add(module)

            relative = is_relative_import(module)
            is_package = not relative and not is_builtin_module(module)
            parsed = ParsedImport(
                statement=match.group(0),
                module=module,
                is_relative=relative,
                is_package=is_package
            )
            if is_package:
                parsed.package_name = extract_package_name(module)
                packages.add(parsed.package_name)
            imports.append(parsed)

    return ImportParseResult(imports=imports, required_packages=sorted(packages))


def _strip_version(dependency: str) -> str:
    # react@18.0.0 -> react, @scope/pkg@1.0 -> @scope/pkg
    if dependency.startswith("@"):
        parts = dependency.split("@")
        return f"@{parts[1]}" if len(parts) >= 3 else dependency
    return dependency.split("@")[0]


def suggest_missing_dependencies(code: str, specified: Optional[list[str]] = None) -> list[str]:
    """Packages imported by the code that are not in the specified dependency list."""
    specified_names = {_strip_version(dep) for dep in specified or []}
    return [pkg for pkg in parse_imports(code).required_packages if pkg not in specified_names]
