import io
import random

from coursekit.sort_demo import check_report, main, run_demo
from coursekit.sorted_list import SortedAList
from coursekit.stock import Stock

STOCKS = [
    Stock("Motorola Inc.", "MOT", 17.49),
    Stock("Tesla", "TSLA", 564.33),
    Stock("Apple", "AAPL", 121.73),
]


def make_list():
    lst = SortedAList()
    for stock in STOCKS:
        lst.insert(stock)
    return lst


def test_check_report_empty():
    report = check_report(SortedAList())
    assert report == "\nvalues: 0\ncapacity: 10\nstock list empty\n"


def test_check_report_full():
    lst = SortedAList()
    for i in range(10):
        lst.insert(Stock(f"n{i}", f"S{i}", i))
    report = check_report(lst)
    assert report.startswith("\nvalues: 10\ncapacity: 10\nstock list full\n")


def test_check_report_lists_stocks():
    report = check_report(make_list())
    assert "values: 3\n" in report
    assert "Tesla\nTSLA\n564.33\n" in report
    assert "stock list" not in report


def test_run_demo_sections_and_final_order():
    lst = make_list()
    out = io.StringIO()
    run_demo(lst, random.Random(3), out)
    text = out.getvalue()
    assert text.count("\nRandomise:\n") == 6
    for label in ("Quick Sort Ascending", "Heap Sort Descending", "Selection Sort Ascending"):
        assert f"\n{label}:\n" in text
    assert [s.symbol for s in lst] == ["TSLA", "MOT", "AAPL"]


def test_main_reads_file(tmp_path, capsys):
    data = tmp_path / "Stock.txt"
    data.write_text("Apple\nAAPL\n121.73\nTesla\nTSLA\n564.33\n", encoding="utf-8")
    assert main([str(data)]) == 0
    output = capsys.readouterr().out
    assert "values: 2\n" in output
    assert "values: 3\n" in output
    assert "Computer Science Club\nCSC\n110101\n" in output
    assert output.rstrip().endswith("Apple\nAAPL\n121.73")


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    captured = capsys.readouterr()
    assert "Error: file not found" in captured.err
    assert "values: 0" in captured.out