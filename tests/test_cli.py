import io

import pytest

from dynaprog.boolean_parenthesization import count_ways
from dynaprog.cli import main
from dynaprog.egg_drop import egg_drop
from dynaprog.knapsack import knapsack, rod_cutting
from dynaprog.lcs import is_subsequence, lcs_length, longest_common_subsequence
from dynaprog.mcm import matrix_chain_cost
from dynaprog.palindrome_partition import min_palindrome_cuts


def _run(monkeypatch, capsys, command, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([command])
    return code, capsys.readouterr().out.strip()


def test_knapsack(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "knapsack", "3\n1 3 4\n15 20 30\n4\n")
    assert code == 0
    assert out == str(knapsack([1, 3, 4], [15, 20, 30], 4))


def test_rod_cutting(monkeypatch, capsys):
    text = "4\n1 2 3 4\n5 6 8 8\n4\n"
    code, out = _run(monkeypatch, capsys, "rod-cutting", text)
    assert code == 0
    assert out == str(rod_cutting([1, 2, 3, 4], [5, 6, 8, 8], 4))


def test_lcs_length(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "lcs", "abcde ace")
    assert out == str(lcs_length("abcde", "ace"))
    assert out == "3"


def test_print_lcs(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "print-lcs", "AGGTAB GXTXAYB")
    assert out == longest_common_subsequence("AGGTAB", "GXTXAYB")
    assert is_subsequence(out, "AGGTAB") and is_subsequence(out, "GXTXAYB")
    assert len(out) == lcs_length("AGGTAB", "GXTXAYB")


def test_mcm(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "mcm", "5\n40 20 30 10 30\n")
    assert out == str(matrix_chain_cost([40, 20, 30, 10, 30]))


def test_palindrome_partition(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "palindrome-partition", "nitik")
    assert out == str(min_palindrome_cuts("nitik"))


def test_boolean_parenthesization(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "boolean-parenthesization", "T|F&T^F")
    assert out == str(count_ways("T|F&T^F", True))


def test_scramble_yes(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "scramble", "great rgeat")
    assert out == "Yes"


def test_scramble_different_lengths(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "scramble", "abc ab")
    assert out == "No"


def test_egg_drop(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "egg-drop", "2 10")
    assert out == str(egg_drop(2, 10))


def test_missing_input_is_an_error(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    with pytest.raises(SystemExit) as excinfo:
        main(["knapsack"])
    assert excinfo.value.code == 2


def test_non_integer_input_is_an_error(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("two 10"))
    with pytest.raises(SystemExit) as excinfo:
        main(["egg-drop"])
    assert excinfo.value.code == 2


def test_unknown_command_is_an_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["no-such-command"])
    assert excinfo.value.code == 2