"""Unit tests for the validate and replay CLI commands."""

from __future__ import annotations

import io
import json

import pytest

from date_range_validation.cli.__main__ import main
from date_range_validation.cli.replay import iter_edits


def _json_lines(text: str) -> list:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


@pytest.mark.unit
class TestValidateCommand:
    def test_success_exit_code(self, capsys) -> None:
        exit_code = main(
            [
                "validate",
                "--start",
                "2022-01-09",
                "--end",
                "2022-01-10",
                "--first-allowed",
                "2022-01-01",
                "--last-allowed",
                "today",
            ]
        )

        payload = _json_lines(capsys.readouterr().out)[-1]
        assert exit_code == 0
        assert payload["state"] == "success"
        assert payload["context"]["first_allowed_date"] == "2022-01-01"

    def test_failure_exit_code(self, capsys) -> None:
        exit_code = main(
            [
                "validate",
                "--start",
                "2019-01-12",
                "--end",
                "aaaaaa",
                "--first-allowed",
                "2022-01-01",
            ]
        )

        payload = _json_lines(capsys.readouterr().out)[-1]
        assert exit_code == 1
        assert payload["state"] == "failure"
        assert payload["context"]["start_date_invalid"] == "DATE_BEFORE_FIRST_ALLOWED"
        assert payload["context"]["end_date_invalid"] == "MALFORMED"

    def test_pair_scope_option(self, capsys) -> None:
        main(
            [
                "validate",
                "--start",
                "2019-01-12",
                "--end",
                "aaaaaa",
                "--first-allowed",
                "2022-01-01",
                "--format-scope",
                "pair",
            ]
        )

        payload = _json_lines(capsys.readouterr().out)[-1]
        assert payload["context"]["start_date_invalid"] is False

    def test_omitted_dates_are_unset(self, capsys) -> None:
        exit_code = main(["validate", "--end", ""])

        payload = _json_lines(capsys.readouterr().out)[-1]
        assert exit_code == 0
        assert payload["context"]["start_date"] is None
        assert payload["context"]["end_date"] is None

    def test_none_disables_configured_boundary(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("DRV_LAST_ALLOWED_DATE", "today")

        exit_code = main(
            ["validate", "--start", "2999-01-01", "--last-allowed", "none"]
        )

        payload = _json_lines(capsys.readouterr().out)[-1]
        assert exit_code == 0
        assert payload["context"]["last_allowed_date"] is None

    def test_absent_boundary_uses_settings(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("DRV_LAST_ALLOWED_DATE", "today")

        exit_code = main(["validate", "--start", "2999-01-01"])

        payload = _json_lines(capsys.readouterr().out)[-1]
        assert exit_code == 1
        assert payload["context"]["start_date_invalid"] == "FUTURE_DATE"

    def test_bad_boundary_is_usage_error(self, capsys) -> None:
        exit_code = main(["validate", "--start", "2022-01-01", "--first-allowed", "soon"])

        assert exit_code == 2
        assert "soon" in capsys.readouterr().err


@pytest.mark.unit
class TestReplayCommand:
    def test_replay_file(self, tmp_path, capsys) -> None:
        edits = tmp_path / "edits.csv"
        edits.write_text(
            "# start,end\n"
            "2022-01-09,2022-01-10\n"
            "aaaaaaa,2022-01-10\n"
            "\n"
            "2022-01-09,2022-01-06\n"
            ",\n",
            encoding="utf-8",
        )

        exit_code = main(["replay", str(edits), "--first-allowed", "2022-01-01"])

        states = [p["state"] for p in _json_lines(capsys.readouterr().out)]
        assert states == ["success", "failure", "failure", "success"]
        assert exit_code == 0

    def test_replay_stdin_final_failure(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("2022-01-09,2022-01-10\nbad,\n"))

        exit_code = main(["replay"])

        payloads = _json_lines(capsys.readouterr().out)
        assert exit_code == 1
        assert payloads[-1]["context"]["start_date_invalid"] == "MALFORMED"
        assert payloads[-1]["context"]["end_date"] is None

    def test_missing_file(self, tmp_path, capsys) -> None:
        exit_code = main(["replay", str(tmp_path / "missing.csv")])

        assert exit_code == 2
        assert "cannot read" in capsys.readouterr().err

    def test_iter_edits(self) -> None:
        lines = ["2022-01-01,2022-01-02\n", "  \n", "# comment\n", "2022-01-03\r\n"]

        assert list(iter_edits(lines)) == [
            ("2022-01-01", "2022-01-02"),
            ("2022-01-03", None),
        ]
