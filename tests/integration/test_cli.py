"""Tests for the yor CLI."""

import json

import pytest
from typer.testing import CliRunner

from yor.api.report.Report import Report
from yor.cli import main
from yor.cli._create_app import _create_app

runner = CliRunner(env={"COLUMNS": "200"})


@pytest.fixture
def app():
    return _create_app()


class TestReportCommand:
    """yor report."""

    def test_cli_output(self, app, snapshot_file):
        result = runner.invoke(app, ["report", str(snapshot_file), "--no-color"])

        assert result.exit_code == 0, result.output
        assert "Yor Findings Summary" in result.output
        assert "New Resources Traced (1):" in result.output
        assert "Updated Resource Traces (1):" in result.output
        assert "aws_s3_bucket.data" in result.output

    def test_json_output(self, app, snapshot_file):
        result = runner.invoke(app, ["report", str(snapshot_file), "--output", "json"])

        assert result.exit_code == 0, result.output
        document = json.loads(result.output)
        assert document["summary"] == {"scanned": 3, "newResources": 1, "updatedResources": 1}
        assert [r["key"] for r in document["updatedResourceTags"]] == ["env", "owner"]

    def test_output_json_file(self, app, snapshot_file, tmp_path):
        out = tmp_path / "yor_report.json"

        result = runner.invoke(app, ["report", str(snapshot_file), "--no-color", "--output-json-file", str(out)])

        assert result.exit_code == 0, result.output
        report = Report.model_validate_json(out.read_bytes())
        assert report.summary.scanned == 3

    def test_config_supplies_defaults(self, app, snapshot_file, yor_home):
        (yor_home / "config.json").write_text(json.dumps({"report": {"output": "json"}}))

        result = runner.invoke(app, ["report", str(snapshot_file)])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["summary"]["scanned"] == 3

    def test_invalid_output_format(self, app, snapshot_file):
        result = runner.invoke(app, ["report", str(snapshot_file), "--output", "yaml"])

        assert result.exit_code == 1
        assert "--output must be 'cli' or 'json'" in result.output

    def test_missing_snapshot(self, app, tmp_path):
        result = runner.invoke(app, ["report", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "Cannot read snapshot" in result.output

    def test_invalid_snapshot(self, app, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"new": "oops"}))

        result = runner.invoke(app, ["report", str(path)])

        assert result.exit_code == 1
        assert "new must be a list" in result.output


class TestTagsCommand:
    """yor tags."""

    def test_lists_all_groups(self, app):
        result = runner.invoke(app, ["tags", "--no-color"])

        assert result.exit_code == 0, result.output
        for name in ("code2cloud", "git", "simple", "git_commit", "yor_trace"):
            assert name in result.output

    def test_group_filter(self, app):
        result = runner.invoke(app, ["tags", "--group", "simple"])

        assert result.exit_code == 0, result.output
        assert "yor_name" in result.output
        assert "git_commit" not in result.output

    def test_unknown_group(self, app):
        result = runner.invoke(app, ["tags", "--group", "nope"])

        assert result.exit_code == 1
        assert "unknown tag group(s): nope" in result.output


class TestMain:
    """Entry point."""

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.startswith("yor ")

    def test_exit_code_propagates(self, tmp_path):
        assert main(["report", str(tmp_path / "nope.json")]) == 1

    def test_success(self, snapshot_file):
        assert main(["report", str(snapshot_file), "--output", "json"]) == 0
