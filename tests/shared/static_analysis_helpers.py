"""Reusable helpers for repository static-analysis tests.

The utilities in this module discover runtime modules under the repository
roots and extract their absolute import targets with ``ast``.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path

RUNTIME_SCAN_ROOTS = ("packages", "resources", "services")
REPO_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class ImportRef:
    """One resolved import target with its source location."""

    file_path: Path
    line: int
    module_name: str

    def format(self) -> str:
        """Render the reference for assertion output."""
        rel = self.file_path.relative_to(REPO_ROOT)
        return f"{rel}:{self.line}: imports {self.module_name}"


def runtime_modules(
    *, repo_root: Path = REPO_ROOT, roots: tuple[str, ...] = RUNTIME_SCAN_ROOTS
) -> dict[str, Path]:
    """Map dotted runtime module names to their files, skipping tests."""
    modules: dict[str, Path] = {}
    for root_name in roots:
        root = repo_root / root_name
        if not root.exists():
            continue
        for file_path in sorted(root.rglob("*.py")):
            rel = file_path.relative_to(repo_root)
            if "tests" in rel.parts or "__pycache__" in rel.parts:
                continue
            modules[module_name_for(rel)] = file_path
    return modules


def module_name_for(rel_path: Path) -> str:
    """Convert a repo-relative file path to a dotted module name."""
    if rel_path.name == "__init__.py":
        return ".".join(rel_path.parent.parts)
    return ".".join(rel_path.with_suffix("").parts)


def imports_of(*, module_name: str, file_path: Path) -> tuple[ImportRef, ...]:
    """Return absolute import targets of one module.

    Relative imports are resolved against ``module_name``; package modules
    resolve against themselves.
    """
    tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
    package = module_name
    if file_path.name != "__init__.py":
        package = module_name.rpartition(".")[0]
    refs: list[ImportRef] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            refs.extend(
                ImportRef(file_path, node.lineno, alias.name) for alias in node.names
            )
        elif isinstance(node, ast.ImportFrom):
            target = node.module or ""
            if node.level:
                parts = package.split(".")
                base = ".".join(parts[: len(parts) - (node.level - 1)])
                target = f"{base}.{target}" if target else base
            refs.append(ImportRef(file_path, node.lineno, target))
    return tuple(refs)


def is_equal_or_child(module_name: str, prefix: str) -> bool:
    """Return True when module equals prefix or is nested below prefix."""
    return module_name == prefix or module_name.startswith(f"{prefix}.")
