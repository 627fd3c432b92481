import io

from datalabs.sparse.cli import info_text, main

MANUAL_INPUT = "2\n2\n1\n1\n0 0 1.5\n1\n1\n0 0 2.5\n"


def _run(monkeypatch, capsys, text, argv=None):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv if argv is not None else [])
    return code, capsys.readouterr().out


def test_info_text_mentions_limits():
    text = info_text()
    assert "|value - 0| > 0.000001" in text
    assert "(if n <= 20 and m <= 20" in text


def test_manual_addition(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, MANUAL_INPUT)
    assert code == 0
    assert "ENTERED MATRIX 1" in out
    assert "SUM MATRIX" in out
    assert "| 4.0 | 0.0 |" in out
    assert out.endswith("Everything went ok, finishing program\n")


def test_bad_dimension_is_asked_again(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "x\n0\n" + MANUAL_INPUT)
    assert code == 0
    assert out.count("ERROR: incorrect n. Try again: ") == 2


def test_zero_element_is_refused(monkeypatch, capsys):
    text = "2\n2\n1\n1\n0 0 0\n0 0 1.5\n1\n1\n0 0 2.5\n"
    code, out = _run(monkeypatch, capsys, text)
    assert code == 0
    assert "this element can't be null (or too close to null)" in out
    assert "Try to input current element again" in out


def test_out_of_range_amount_is_asked_again(monkeypatch, capsys):
    text = "2\n2\n9\n" + MANUAL_INPUT[4:]
    code, out = _run(monkeypatch, capsys, text)
    assert code == 0
    assert "ERROR: incorrect amount nonnull elements. Try again: " in out


def test_automatic_fill_is_reproducible(monkeypatch, capsys):
    text = "3\n3\n4\n0\n5\n0\n"
    code_a, out_a = _run(monkeypatch, capsys, text, ["--seed", "7"])
    code_b, out_b = _run(monkeypatch, capsys, text, ["--seed", "7"])
    assert code_a == code_b == 0
    matrices_a = out_a.split("\nA comparative table")[0]
    matrices_b = out_b.split("\nA comparative table")[0]
    assert matrices_a == matrices_b
    assert "Successfully added 4 nonnul elements of matrix" in out_a


def test_end_of_input_fails(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2\n")
    assert code == 1
    assert "ERROR: unexpected end of input" in out