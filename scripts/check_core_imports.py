#!/usr/bin/env python3
"""
Fail if the request/response kernel imports the transport or the services.
Checks the transport-agnostic modules under src/scalr_client/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE_DIR = REPO_ROOT / "src" / "scalr_client"

KERNEL_MODULES = (
    "errors.py",
    "jsonapi.py",
    "models.py",
    "pagination.py",
    "request.py",
    "validation.py",
)

FORBIDDEN_PREFIXES = (
    "httpx",
    "dotenv",
    "scalr_client.client",
    "scalr_client.config",
    "scalr_client.resources",
    "scalr_client.service",
)


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def _absolute(node: ast.ImportFrom) -> str:
    mod = node.module or ""
    if node.level:
        return f"scalr_client.{mod}" if mod else "scalr_client"
    return mod


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if is_forbidden(alias.name):
                    errors.append(f"{path}: forbidden import '{alias.name}'")
        elif isinstance(node, ast.ImportFrom):
            mod = _absolute(node)
            names = [mod] + [f"{mod}.{a.name}" for a in node.names]
            if any(is_forbidden(n) for n in names):
                errors.append(f"{path}: forbidden import '{mod}'")
    return errors


def main() -> int:
    violations: list[str] = []
    for name in KERNEL_MODULES:
        violations.extend(scan_file(PACKAGE_DIR / name))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
