"""Tests for the project metadata."""

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


class TestProjectMetadata:
    """Verify what ``pyproject.toml`` points at."""

    def test_readme_is_the_user_readme(self) -> None:
        """The long description is the short user-facing README."""
        project = tomllib.loads((ROOT / "pyproject.toml").read_text())["project"]
        assert project["readme"] == "README.md"
        assert (ROOT / project["readme"]).is_file()
