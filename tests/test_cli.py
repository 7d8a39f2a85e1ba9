import pytest

from sqmatrix.cli import main, report
from sqmatrix.matrices import read_matrices

INT_TEXT = """4 0
1 2 3 4
5 6 7 8
9 10 11 12
13 14 15 16
1 0 0 0
0 1 0 0
0 0 1 0
0 0 0 1
"""

DOUBLE_TEXT = """3 1
1.5 2.5 3.5
4.5 5.5 6.5
7.5 8.5 9.5
1 0 0
0 1 0
0 0 1
"""


def fresh(text=INT_TEXT):
    return read_matrices(text)


def test_report_headings_in_order():
    a, b = fresh()
    text = report(a, b)
    positions = [text.index(f"QUESTION {n} ") for n in range(1, 8)]
    assert positions == sorted(positions)
    assert text.startswith("================================= TYPE FLAGS")


def test_report_shows_sum_and_product():
    a, b = fresh()
    expected_sum = (a + b).format()
    expected_product = (a * b).format()
    text = report(a, b)
    assert "AplusB.array = \n" + expected_sum in text
    assert "AtimesB.array = \n" + expected_product in text


def test_product_with_identity_equals_first_matrix():
    a, b = fresh()
    original = a.format()
    text = report(a, b)
    assert "AtimesB.array = \n" + original in text


def test_report_diagonal_sums():
    a, b = fresh()
    main_a, sec_a = a.main_diag_sum(), a.secondary_diag_sum()
    main_b = b.main_diag_sum()
    text = report(a, b)
    assert f"A's main diagonal sum = {main_a}\n" in text
    assert f"A's secondary diagonal sum = {sec_a}\n" in text
    assert f"B's main diagonal sum = {main_b}\n" in text


def test_report_mutates_matrices():
    a, b = fresh()
    ref_a, ref_b = fresh()
    ref_a.swap_rows(0, 2)
    ref_a.swap_columns(1, 2)
    ref_b.swap_rows(1, 3)
    ref_b.swap_columns(0, 3)
    before_a = ref_a[2, 1]
    report(a, b)
    assert a[2, 1] == 1633
    assert b[0, 3] == 1483
    ref_a[2, 1] = 1633
    ref_b[0, 3] = 1483
    assert a == ref_a
    assert b == ref_b
    assert before_a != 1633


def test_report_update_lines():
    a, b = fresh()
    text = report(a, b)
    assert "===> Updated value of A[2][1] to 1633\n" in text
    assert "===> Updated value of B[0][3] to 1483\n" in text
    assert "===> Swapped rows 0 and 2 of A.\n" in text
    assert "===> Swapped columns 0 and 3 of B.\n" in text


def test_report_double_uses_fixed_notation():
    a, b = fresh(DOUBLE_TEXT)
    text = report(a, b)
    assert "A.type_flag = 1\n" in text
    assert "===> Updated value of A[2][1] to 1633.000000\n" in text
    assert a[2, 1] == 1633.0


def test_report_out_of_range_reports_error(capsys):
    a, b = fresh(DOUBLE_TEXT)
    before = b.format()
    text = report(a, b)
    err = capsys.readouterr().err
    assert "Indices out of range." in err
    # B is 3x3: row 3 and column 3 do not exist, so B only gets updated where valid.
    assert "B[0][3] before updating = 0.000000\n" in text
    assert b.format() == before


def test_main_with_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(INT_TEXT)
    a, b = fresh()
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == report(a, b)


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Could not open specified file." in capsys.readouterr().err


def test_main_missing_default_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "Lab9_Test_File.txt" in capsys.readouterr().err


def test_main_default_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "Lab9_Test_File.txt").write_text(INT_TEXT)
    assert main([]) == 0
    assert "A.size = 4\n" in capsys.readouterr().out


@pytest.mark.parametrize("content", ["4 7\n1 2", "", "2 0\n1 2 3"])
def test_main_bad_content(tmp_path, capsys, content):
    path = tmp_path / "bad.txt"
    path.write_text(content)
    assert main([str(path)]) == 1
    assert "Error in 'main()'" in capsys.readouterr().err