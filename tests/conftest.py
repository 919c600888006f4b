"""Shared pytest configuration and fixtures for all tests."""

import importlib
import io
import json
import logging
from pathlib import Path

import pytest
from rich.console import Console

from yor.api.tags.TagChangeAccumulator import TagChangeAccumulator
from yor.api.tags.TaggedBlock import TaggedBlock


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests going through the CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Snapshot Helpers
# =============================================================================


def s3_bucket_block() -> TaggedBlock:
    """Updated block: ``env`` added, ``owner`` changed from alice to bob."""
    return TaggedBlock(
        file_path="main.tf",
        resource_id="aws_s3_bucket.data",
        trace_id="yor_trace_123",
        tags={"owner": "bob", "env": "prod"},
        previous_tags={"owner": "alice"},
    )


def snapshot_dict() -> dict:
    """Snapshot with one new and one updated resource out of three scanned."""
    new_block = {
        "file": "network.tf",
        "resourceId": "aws_vpc.main",
        "traceId": "yor_trace_456",
        "tags": {"yor_trace": "yor_trace_456", "git_repo": "infra"},
    }
    updated_block = {
        "file": "main.tf",
        "resourceId": "aws_s3_bucket.data",
        "traceId": "yor_trace_123",
        "tags": {"owner": "bob", "env": "prod"},
        "previousTags": {"owner": "alice"},
    }
    untouched_block = {
        "file": "main.tf",
        "resourceId": "aws_iam_role.ci",
        "traceId": "yor_trace_789",
        "tags": {"team": "ops"},
        "previousTags": {"team": "ops"},
    }
    return {
        "scanned": [new_block, updated_block, untouched_block],
        "new": [new_block],
        "updated": [updated_block],
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def yor_home(tmp_path: Path, monkeypatch) -> Path:
    """Point YOR_HOME at a temporary directory for every test."""
    home = tmp_path / "yor_home"
    home.mkdir()
    monkeypatch.setenv("YOR_HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers attached by configure_logging so each test starts clean."""
    yield
    root_logger = logging.getLogger("yor")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)
    importlib.import_module("yor.utils.configure_logging")._CONFIGURED = False


@pytest.fixture
def accumulator() -> TagChangeAccumulator:
    return TagChangeAccumulator.from_dict(snapshot_dict())


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot_dict()))
    return path


@pytest.fixture
def console() -> Console:
    """Plain, wide console writing to a string buffer."""
    return Console(file=io.StringIO(), width=200, no_color=True, highlight=False, color_system=None)
