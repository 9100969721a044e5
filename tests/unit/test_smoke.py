"""
Smoke tests to verify the core dependencies are installed correctly.

Run with: pytest tests/unit/test_smoke.py -v
"""

import sys

import pytest


class TestPythonVersion:
    """Verify Python version requirements."""

    def test_python_310_or_higher(self) -> None:
        assert sys.version_info >= (3, 10)


class TestCoreDependencies:
    """Verify the runtime stack."""

    def test_pydantic_v2(self) -> None:
        """Pydantic v2 is required for the api response models."""
        import pydantic

        major_version = int(pydantic.VERSION.split(".")[0])
        assert major_version >= 2, f"Pydantic v2 required, got {pydantic.VERSION}"

    def test_structlog_binding(self) -> None:
        import structlog

        logger = structlog.get_logger().bind(component="provenance", operation="test")
        assert logger is not None


class TestProjectVersion:
    """Verify project metadata is accessible."""

    def test_version_format(self, project_version: str) -> None:
        parts = project_version.split(".")
        assert len(parts) >= 2, f"Version must be semver format, got {project_version}"


class TestAsyncCapabilities:
    """Verify async/await functionality."""

    @pytest.mark.asyncio
    async def test_async_function_runs(self) -> None:
        import asyncio

        result = await asyncio.sleep(0, result="success")
        assert result == "success"
