import csv
import json

from click.testing import CliRunner

from amort_calc.main import cli


def run(*args):
    return CliRunner().invoke(cli, list(args))


class TestScheduleCommand:
    def test_prints_summary_and_rows(self):
        result = run("schedule", "-p", "10k", "-r", "5", "-t", "1")
        assert result.exit_code == 0, result.output
        assert "Payment amount     : 856.07" in result.output
        lines = [line for line in result.output.splitlines() if line.startswith("12\t")]
        assert len(lines) == 1
        assert lines[0].endswith("0.00")

    def test_export_json(self, tmp_path):
        path = tmp_path / "out.json"
        result = run("schedule", "-p", "10000", "-r", "5", "-t", "1", "--output", str(path))
        assert result.exit_code == 0, result.output
        data = json.loads(path.read_text())
        assert len(data["schedule"]) == 13
        assert data["schedule"][0]["index"] is None
        assert data["schedule"][0]["balance"] == 10000
        assert round(data["summary"]["payment_amount"], 2) == 856.07

    def test_export_csv(self, tmp_path):
        path = tmp_path / "out.csv"
        result = run("schedule", "-p", "10000", "-r", "5", "-t", "1", "-f", "52", "--output", str(path))
        assert result.exit_code == 0, result.output
        with path.open(newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["Index", "Amount", "Interest", "Principal", "Balance"]
        assert len(rows) == 54
        assert rows[1][0] == ""

    def test_unsupported_output(self, tmp_path):
        result = run("schedule", "-p", "10000", "-r", "5", "-t", "1", "--output", str(tmp_path / "out.txt"))
        assert result.exit_code == 2

    def test_invalid_principal_text(self):
        result = run("schedule", "-p", "lots", "-r", "5", "-t", "1")
        assert result.exit_code == 2
        assert "Invalid amount" in result.output

    def test_rejected_terms(self):
        result = run("schedule", "-p", "0", "-r", "5", "-t", "1")
        assert result.exit_code == 1
        assert "Principal must be positive" in result.output

    def test_compounding_more_often_than_payments(self):
        result = run("schedule", "-p", "10000", "-r", "5", "-t", "1", "-f", "4", "-c", "12")
        assert result.exit_code == 2

    def test_max_periods_below_term_still_pays_off(self, tmp_path):
        path = tmp_path / "out.json"
        result = run("schedule", "-p", "10000", "-r", "5", "-t", "30", "--max-periods", "100", "--output", str(path))
        assert result.exit_code == 0, result.output
        data = json.loads(path.read_text())
        assert data["summary"]["payments_made"] == 360

    def test_nan_rate_is_usage_error(self):
        result = run("summary", "-p", "10000", "-r", "nan", "-t", "1")
        assert result.exit_code == 2
        assert "--rate" in result.output

    def test_infinite_rate_is_usage_error(self):
        result = run("summary", "-p", "10000", "-r", "inf", "-t", "1")
        assert result.exit_code == 2

    def test_huge_term_rejected(self):
        result = run("summary", "-p", "10000", "-r", "5", "-t", "1e30")
        assert result.exit_code == 1
        assert "Term is too long" in result.output


class TestSummaryCommand:
    def test_weekly_shows_savings(self):
        result = run("summary", "-p", "10000", "-r", "5", "-t", "1", "-f", "52")
        assert result.exit_code == 0, result.output
        assert "Weekly" in result.output
        assert "Savings per year" in result.output

    def test_quarterly_defaults_compounding(self, tmp_path):
        path = tmp_path / "summary.json"
        result = run("summary", "-p", "10000", "-r", "5", "-t", "2", "-f", "4", "--output", str(path))
        assert result.exit_code == 0, result.output
        summary = json.loads(path.read_text())["summary"]
        assert summary["num_periods"] == 8
        assert summary["period_rate"] == 0.05 / 4

    def test_summary_requires_json(self, tmp_path):
        result = run("summary", "-p", "10000", "-r", "5", "-t", "1", "--output", str(tmp_path / "s.csv"))
        assert result.exit_code == 2


def test_frequencies_command():
    result = run("frequencies")
    assert result.exit_code == 0
    assert "52  Weekly" in result.output
    assert len(result.output.splitlines()) == 8


def test_verbose_flag_runs():
    result = run("-v", "summary", "-p", "10000", "-r", "5", "-t", "1")
    assert result.exit_code == 0, result.output
    assert "Monthly" in result.output
