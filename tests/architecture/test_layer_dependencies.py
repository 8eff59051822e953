"""
Architecture tests to enforce layer boundaries.

Rules enforced:
- domain/ cannot import frameworks or outer layers
- application/ cannot import infrastructure/ or web/database frameworks
- infrastructure/ can import application/ and domain/
"""

import ast
import os
from pathlib import Path

import pytest

PACKAGE_PATH = Path(__file__).parent.parent.parent / "formrules"


def get_python_files(directory: Path) -> list[Path]:
    """Get all Python files in a directory recursively."""
    python_files = []
    if not directory.exists():
        return python_files

    for root, dirs, files in os.walk(directory):
        dirs[:] = [d for d in dirs if d != "__pycache__"]

        for file in files:
            if file.endswith(".py"):
                python_files.append(Path(root) / file)

    return python_files


def extract_imports(file_path: Path) -> set[str]:
    """Extract absolute import names from a Python file."""
    imports = set()

    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except (SyntaxError, UnicodeDecodeError) as e:
        pytest.fail(f"Failed to parse {file_path}: {e}")

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.add(alias.name)
        elif isinstance(node, ast.ImportFrom):
            # Relative imports stay within the same package
            if node.level > 0:
                continue
            if node.module:
                imports.add(node.module)

    return imports


def find_violations(layer: str, forbidden_prefixes: list[str]) -> list[str]:
    violations = []
    for file_path in get_python_files(PACKAGE_PATH / layer):
        for import_name in extract_imports(file_path):
            if any(import_name == prefix or import_name.startswith(f"{prefix}.") for prefix in forbidden_prefixes):
                violations.append(f"{file_path.relative_to(PACKAGE_PATH)}: imports {import_name}")
    return violations


FRAMEWORKS = ["fastapi", "starlette", "sqlalchemy", "pydantic", "httpx", "pytest", "hypothesis", "structlog"]


class TestLayerDependencies:
    """Test that layers only depend inwards."""

    def test_domain_has_no_framework_imports(self):
        violations = find_violations("domain", FRAMEWORKS)
        assert not violations, "\n".join(violations)

    def test_domain_does_not_import_outer_layers(self):
        violations = find_violations(
            "domain", ["formrules.application", "formrules.infrastructure", "formrules.shared"]
        )
        assert not violations, "\n".join(violations)

    def test_application_does_not_import_infrastructure(self):
        violations = find_violations("application", ["formrules.infrastructure"])
        assert not violations, "\n".join(violations)

    def test_application_has_no_web_or_database_imports(self):
        violations = find_violations("application", ["fastapi", "starlette", "sqlalchemy"])
        assert not violations, "\n".join(violations)
