"""Tests to verify hexagonal architecture structure."""

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the package directory path."""
    return PROJECT_ROOT / "shareholder_voting"


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all main layer directories exist."""
    for layer in ["domain", "application", "infrastructure", "config", "bootstrap"]:
        assert (package_path / layer).is_dir(), f"Missing layer: {layer}"
        assert (package_path / layer / "__init__.py").is_file(), (
            f"Missing {layer}/__init__.py"
        )


def test_domain_is_free_of_third_party_imports(package_path: Path) -> None:
    """Domain stays pure: no structlog, pydantic or other libraries."""
    for py_file in (package_path / "domain").rglob("*.py"):
        content = py_file.read_text()
        for library in ("structlog", "pydantic"):
            assert f"import {library}" not in content, f"{py_file} imports {library}"
            assert f"from {library}" not in content, f"{py_file} imports {library}"


def test_version(project_version: str) -> None:
    assert project_version == "0.1.0"
