from debtwise.cli import main
from debtwise.data.debt_store import DebtStore


def _run(db, *args):
    return main(["--db", db, *args])


class TestCli:
    def test_add_list_and_plan(self, tmp_path, capsys):
        db = str(tmp_path / "cli.db")
        assert _run(db, "add", "Loan", "--balance", "1200", "--rate", "12", "--min", "200", "--type", "Personal Loan") == 0
        assert _run(db, "budget", "200") == 0
        assert _run(db, "plan", "--strategy", "snowball", "--months", "2") == 0

        out = capsys.readouterr().out
        assert "Added Loan" in out
        assert "Monthly budget: $200.00" in out
        assert "Time to payoff:   0y 7m" in out
        assert "Total interest:   $43.86" in out
        assert "Month 2 (" in out
        assert "Month 3 (" not in out

    def test_compare(self, tmp_path, capsys):
        db = str(tmp_path / "cli.db")
        _run(db, "add", "A", "--balance", "500", "--rate", "5", "--min", "50")
        _run(db, "add", "B", "--balance", "500", "--rate", "20", "--min", "50")
        _run(db, "budget", "150")
        assert _run(db, "compare") == 0
        out = capsys.readouterr().out
        assert "avalanche" in out
        assert "<- recommended" in out
        assert "Avalanche saves $" in out

    def test_remove_and_clear(self, tmp_path, capsys):
        db = str(tmp_path / "cli.db")
        _run(db, "add", "A", "--balance", "500", "--rate", "5", "--min", "50")
        _run(db, "add", "B", "--balance", "500", "--rate", "20", "--min", "50")
        debt_id = DebtStore(db).list_debts()[0].id
        assert _run(db, "remove", debt_id) == 0
        assert [d.name for d in DebtStore(db).list_debts()] == ["B"]
        assert _run(db, "clear") == 0
        assert _run(db, "list") == 0
        assert "No debts added yet." in capsys.readouterr().out

    def test_invalid_input_exits_nonzero(self, tmp_path, capsys):
        db = str(tmp_path / "cli.db")
        assert _run(db, "add", "A", "--balance", "0", "--rate", "5", "--min", "50") == 1
        assert _run(db, "remove", "missing") == 1
        err = capsys.readouterr().err
        assert "must be greater than zero" in err
        assert "no debt with id missing" in err

    def test_empty_plan(self, tmp_path, capsys):
        db = str(tmp_path / "cli.db")
        assert _run(db, "plan") == 0
        assert "No payment schedule available" in capsys.readouterr().out
