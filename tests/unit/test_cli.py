"""Unit tests for the command line interface."""

import json

import pytest

from psychometrics import cli
from psychometrics.core.config import Settings


@pytest.fixture(autouse=True)
def cli_settings(monkeypatch):
    """Run the CLI with test settings."""
    settings = Settings(_env_file=None, APP_ENV="test", SCORING_VERSION="cli-1.0")
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    return settings


@pytest.fixture
def bank_file(tmp_path):
    """Three-question CFR bank written with camelCase keys."""
    path = tmp_path / "bank.json"
    path.write_text(json.dumps({
        "testId": "TEST_CFR",
        "questions": [
            {"id": f"q{i}", "questionNumber": i, "questionType": "likert"} for i in range(1, 4)
        ],
    }))
    return path


def read_error(stderr):
    """Decode the JSON error document printed to stderr."""
    start = stderr.index("{\n")
    document, _ = json.JSONDecoder().raw_decode(stderr[start:])
    return document


def write_submission(tmp_path, answers, completed_at="2024-05-06T09:20:00Z"):
    """Write a submission document and return its path."""
    path = tmp_path / "submission.json"
    path.write_text(json.dumps({
        "testId": "TEST_CFR",
        "workerId": "w-7",
        "workerProcessId": "p-7",
        "startedAt": "2024-05-06T09:00:00Z",
        "completedAt": completed_at,
        "answers": [{"questionId": qid, "answer": value} for qid, value in answers.items()],
    }))
    return path


class TestScoreCommand:
    """Test the score command."""

    def test_score_prints_result(self, tmp_path, bank_file, capsys):
        """Test a successful scoring run."""
        submission = write_submission(tmp_path, {"q1": 5, "q2": 4, "q3": 3})

        status = cli.main(["score", "-i", "test_cfr", "-b", str(bank_file), "-s", str(submission)])

        result = json.loads(capsys.readouterr().out)
        assert status == 0
        assert result["instrument"] == "TEST_CFR"
        assert result["worker_process_id"] == "p-7"
        assert result["raw_scores"]["total"] == 12.0
        assert result["completion_time"] == 1_200_000
        assert result["scoring_version"] == "cli-1.0"

    def test_compact_output(self, tmp_path, bank_file, capsys):
        """Test single-line output."""
        submission = write_submission(tmp_path, {"q1": 5, "q2": 4, "q3": 3})

        cli.main(["score", "-i", "TEST_CFR", "-b", str(bank_file), "-s", str(submission), "--compact"])

        assert len(capsys.readouterr().out.strip().splitlines()) == 1

    def test_incomplete_submission_fails(self, tmp_path, bank_file, capsys):
        """Test that engine errors are printed to stderr."""
        submission = write_submission(tmp_path, {"q1": 5})

        status = cli.main(["score", "-i", "TEST_CFR", "-b", str(bank_file), "-s", str(submission)])

        captured = capsys.readouterr()
        error = read_error(captured.err)
        assert status == 1
        assert captured.out == ""
        assert error["error_type"] == "IncompleteSubmissionError"
        assert error["details"]["expected"] == 3

    def test_allow_incomplete_flag(self, tmp_path, bank_file, capsys):
        """Test partial scoring from the command line."""
        submission = write_submission(tmp_path, {"q1": 5})

        status = cli.main([
            "score", "-i", "TEST_CFR", "-b", str(bank_file), "-s", str(submission),
            "--allow-incomplete",
        ])

        assert status == 0
        assert json.loads(capsys.readouterr().out)["is_complete"] is False

    def test_unknown_instrument(self, tmp_path, bank_file, capsys):
        """Test an instrument code with no strategy."""
        submission = write_submission(tmp_path, {"q1": 5, "q2": 4, "q3": 3})

        status = cli.main(["score", "-i", "TEST_X", "-b", str(bank_file), "-s", str(submission)])

        assert status == 1
        assert read_error(capsys.readouterr().err)["error_type"] == "UnknownInstrumentError"

    def test_invalid_document(self, tmp_path, bank_file, capsys):
        """Test a submission missing required fields."""
        submission = tmp_path / "submission.json"
        submission.write_text(json.dumps({"testId": "TEST_CFR"}))

        status = cli.main(["score", "-i", "TEST_CFR", "-b", str(bank_file), "-s", str(submission)])

        assert status == 1
        assert read_error(capsys.readouterr().err)["error_type"] == "ValidationError"

    def test_missing_file(self, tmp_path, bank_file, capsys):
        """Test an input path that does not exist."""
        status = cli.main([
            "score", "-i", "TEST_CFR", "-b", str(bank_file), "-s", str(tmp_path / "nope.json"),
        ])

        assert status == 1
        assert read_error(capsys.readouterr().err)["error_type"] == "FileNotFoundError"


class TestValidateCommand:
    """Test the validate command."""

    def test_valid_submission(self, tmp_path, bank_file, capsys):
        """Test a clean report."""
        submission = write_submission(tmp_path, {"q1": 5, "q2": 4, "q3": 3})

        status = cli.main(["validate", "-i", "TEST_CFR", "-b", str(bank_file), "-s", str(submission)])

        report = json.loads(capsys.readouterr().out)
        assert status == 0
        assert report["is_valid"] is True
        assert "cleaned_value" not in report

    def test_invalid_submission(self, tmp_path, bank_file, capsys):
        """Test that every problem is reported."""
        submission = write_submission(
            tmp_path, {"q1": 5, "q9": 4}, completed_at="2024-05-06T08:00:00Z"
        )

        status = cli.main(["validate", "-i", "TEST_CFR", "-b", str(bank_file), "-s", str(submission)])

        report = json.loads(capsys.readouterr().out)
        assert status == 1
        assert len(report["errors"]) == 3


class TestInstrumentsCommand:
    """Test the instruments command."""

    def test_lists_instruments(self, capsys):
        """Test one line per supported instrument."""
        status = cli.main(["instruments"])

        lines = capsys.readouterr().out.strip().splitlines()
        assert status == 0
        assert len(lines) == 6
        assert lines[0].startswith("TEST_16PF\t")

    def test_command_is_required(self):
        """Test that argparse rejects a missing command."""
        with pytest.raises(SystemExit):
            cli.main([])
