from pathlib import Path

from apps.cli.solve import main


def _wordlist(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    p.write_text("cat\nact\ncats\nscat\ndog\n", encoding="utf-8")
    return str(p)


def test_solve_cli_prints_report(tmp_path, capsys):
    rc = main(["CATS", "--starts-with", "ca", "--wordlist", _wordlist(tmp_path)])
    assert rc == 0
    assert capsys.readouterr().out == "CAT (5)\nCATS (6)\n"


def test_solve_cli_sort_length_and_limit(tmp_path, capsys):
    rc = main(["CATS?", "--sort", "length", "--limit", "2", "--wordlist", _wordlist(tmp_path)])
    assert rc == 0
    # ACT CAT CATS SCAT; DOG needs three blanks
    assert capsys.readouterr().out == "CATS (6)\nSCAT (6)\n"


def test_solve_cli_no_results(tmp_path, capsys):
    rc = main(["ZZ", "--wordlist", _wordlist(tmp_path)])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "No results"


def test_solve_cli_missing_dictionary(tmp_path, capsys):
    rc = main(["CAT", "--wordlist", str(tmp_path / "missing.txt")])
    assert rc == 1
    assert "Dictionary unavailable" in capsys.readouterr().err


def test_solve_cli_empty_dictionary(tmp_path, capsys):
    p = tmp_path / "words.txt"
    p.write_text("\n\n", encoding="utf-8")
    rc = main(["CAT", "--wordlist", str(p)])
    assert rc == 1
    assert "no usable words" in capsys.readouterr().err


def test_solve_cli_trims_constraint_input(tmp_path, capsys):
    rc = main(["CATS", "--starts-with", " ca ", "--wordlist", _wordlist(tmp_path)])
    assert rc == 0
    assert capsys.readouterr().out == "CAT (5)\nCATS (6)\n"
