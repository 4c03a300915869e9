"""System-level static checks for cross-component dependency direction.

Shared packages sit at the bottom, adapters above them, state components
above adapters, then coordinators and the loader; only the explorer wiring
may import everything. Coordinators never import one another: they talk
through notifications.
"""

from __future__ import annotations

from tests.shared.static_analysis_helpers import (
    imports_of,
    is_equal_or_child,
    runtime_modules,
)

_FORBIDDEN: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "packages.explorer_shared",
        ("packages.explorer_core", "resources", "services"),
    ),
    ("resources.adapters", ("packages.explorer_core", "services")),
    (
        "services.state",
        ("packages.explorer_core", "services.selection", "services.action"),
    ),
    ("services.action", ("packages.explorer_core", "services.selection")),
)

_COORDINATOR_ROOT = "services.selection"


def test_lower_layers_do_not_import_higher_layers() -> None:
    """Reject import edges that point up the layer stack."""
    violations: list[str] = []
    for module_name, file_path in runtime_modules().items():
        for owner, forbidden in _FORBIDDEN:
            if not is_equal_or_child(module_name, owner):
                continue
            for ref in imports_of(module_name=module_name, file_path=file_path):
                if any(is_equal_or_child(ref.module_name, item) for item in forbidden):
                    violations.append(ref.format())

    assert not violations, "\n".join(violations)


def test_coordinators_do_not_import_each_other() -> None:
    """Each coordinator package only reaches shared code, state and adapters."""
    violations: list[str] = []
    for module_name, file_path in runtime_modules().items():
        if not is_equal_or_child(module_name, _COORDINATOR_ROOT):
            continue
        own = ".".join(module_name.split(".")[:3])
        for ref in imports_of(module_name=module_name, file_path=file_path):
            if not is_equal_or_child(ref.module_name, _COORDINATOR_ROOT):
                continue
            if not is_equal_or_child(ref.module_name, own):
                violations.append(ref.format())

    assert not violations, "\n".join(violations)
