#!/usr/bin/env python3
"""Check hexagonal layer boundaries inside the provenance_verifier package.

Layers, innermost first:
- domain/: records, rules and errors; imports no other layer
- application/: ports and services; imports domain/
- infrastructure/: stubs, store, logging; imports domain/ and application/
- api/: response models and adapters; imports application/ and domain/

config/ and bootstrap/ are not layers. Any layer may read config, and
bootstrap wires everything together, so neither is checked.

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import argparse
import ast
import sys
from pathlib import Path
from typing import NamedTuple

PACKAGE_NAME = "provenance_verifier"

LAYER_HIERARCHY: dict[str, int] = {
    "domain": 0,
    "application": 1,
    "infrastructure": 2,
    "api": 3,
}

ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "application": {"domain"},
    "infrastructure": {"domain", "application"},
    "api": {"application", "domain"},
}


class Violation(NamedTuple):
    path: str
    line: int
    message: str


def get_import_modules(node: ast.Import | ast.ImportFrom) -> list[str]:
    """Return every module an import statement names.

    `import a, b` names two modules; a relative `from . import x` names none.
    """
    if isinstance(node, ast.ImportFrom):
        return [node.module] if node.module else []
    return [alias.name for alias in node.names]


def _layer_of(py_file: Path, package_dir: Path) -> str | None:
    try:
        parts = py_file.relative_to(package_dir).parts
    except ValueError:
        return None
    if parts and parts[0] in LAYER_HIERARCHY:
        return parts[0]
    return None


def _target_layer(module: str) -> str | None:
    parts = module.split(".")
    if len(parts) < 2 or parts[0] != PACKAGE_NAME:
        return None
    return parts[1] if parts[1] in LAYER_HIERARCHY else None


def check_file_imports(py_file: Path, package_dir: Path) -> list[Violation]:
    """Check one file for imports that cross a forbidden layer boundary."""
    layer = _layer_of(py_file, package_dir)
    if layer is None:
        return []

    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return []

    allowed = ALLOWED_IMPORTS[layer]
    violations: list[Violation] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        for module in get_import_modules(node):
            target = _target_layer(module)
            if target is None or target == layer or target in allowed:
                continue
            violations.append(
                Violation(
                    str(py_file),
                    node.lineno,
                    f"{layer} layer cannot import from {target}",
                )
            )
    return violations


def check_import_boundaries(package_dir: Path) -> list[Violation]:
    """Check every module under the package directory."""
    if not package_dir.exists():
        print(f"Error: Package directory '{package_dir}' does not exist", file=sys.stderr)
        return []

    violations: list[Violation] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))
    return violations


def format_violations(violations: list[Violation]) -> str:
    """Format violations for terminal output."""
    if not violations:
        return ""
    lines = ["Import boundary violations found:", ""]
    lines.extend(f"  {v.path}:{v.line}: {v.message}" for v in sorted(violations))
    lines.extend(["", f"Total: {len(violations)} violation(s)"])
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "package_dir",
        nargs="?",
        type=Path,
        default=Path(__file__).parent.parent / PACKAGE_NAME,
    )
    args = parser.parse_args()

    violations = check_import_boundaries(args.package_dir)
    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
