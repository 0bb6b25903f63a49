from amort_calc.engine import compute_schedule
from amort_calc.formatter import print_schedule, print_summary


class TestPrintSummary:
    def test_monthly_plan_hides_comparison(self, monthly_terms, capsys):
        _, summary = compute_schedule(monthly_terms)
        print_summary(summary)
        out = capsys.readouterr().out
        assert "Payment amount     : 856.07" in out
        assert "Savings per year" not in out

    def test_weekly_plan_shows_comparison(self, weekly_terms, capsys):
        _, summary = compute_schedule(weekly_terms)
        print_summary(summary)
        assert "Savings per year" in capsys.readouterr().out

    def test_comparison_keyed_on_frequency_value(self, monthly_terms, capsys):
        _, summary = compute_schedule(monthly_terms)
        summary["frequency_text"] = "Mensuel"
        print_summary(summary)
        assert "Savings per year" not in capsys.readouterr().out


def test_print_schedule_blank_initial_row(monthly_terms, capsys):
    schedule, _ = compute_schedule(monthly_terms)
    print_schedule(schedule)
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "\t\t\t\t10000.00"
    assert len(lines) == 14
