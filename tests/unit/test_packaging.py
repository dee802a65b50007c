"""Unit tests for the project metadata in pyproject.toml."""

import tomllib
from pathlib import Path

import pytest

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


@pytest.fixture(scope="module")
def project() -> dict:
    with PYPROJECT.open("rb") as fh:
        return tomllib.load(fh)["project"]


@pytest.mark.unit
class TestProjectMetadata:
    def test_long_description_is_not_the_design_notes(self, project):
        assert project.get("readme") != "DESIGN.md"

    def test_cli_entry_point(self, project):
        assert project["scripts"]["age-calculator"] == "main:run"

    def test_boto3_only_in_deploy_extra(self, project):
        assert not any(dep.startswith("boto3") for dep in project["dependencies"])
        assert any(dep.startswith("boto3") for dep in project["optional-dependencies"]["deploy"])
