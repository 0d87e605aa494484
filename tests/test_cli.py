"""Tests for the admin CLI helpers."""

from tradejournal.cli import import_csv, print_batch_result, read_rows


CSV_TEXT = """accountId,assetId,startBalance,dailyProfit,lotSize,tradeDate,notes
A1,X,1000,25.5,0.2,2025-01-06,gap fill
A1,X,,10,0.1,2025-01-07,
A2,Y,500,-12,1,2025-01-07,news spike
"""


def test_read_rows_handles_bom(tmp_path):
    path = tmp_path / "journal.csv"
    path.write_text(CSV_TEXT, encoding="utf-8-sig")
    rows = read_rows(path)
    assert len(rows) == 3
    assert rows[0]["accountId"] == "A1"
    assert rows[1]["startBalance"] == ""


def test_import_csv_saves_valid_rows(tmp_path, seeded, ledger, capsys):
    path = tmp_path / "journal.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")

    result = import_csv(path, seeded)

    assert result.overall_status == "partial"
    assert result.success_count == 2
    assert [e.notes for e in ledger.read_all()] == ["gap fill", "news spike"]

    print_batch_result(result)
    out = capsys.readouterr().out
    assert out.startswith("PARTIAL: Saved 2 entries, 1 failed")
    assert "row 2: ValidationFailed: startBalance is required" in out
