import pytest

import main
from conftest import scripted


def test_arg_parser_defaults():
    args = main.build_arg_parser().parse_args([])
    assert not args.examples
    assert not args.build
    assert args.plot is None
    assert not args.verbose


def test_examples_and_build_are_exclusive():
    with pytest.raises(SystemExit):
        main.build_arg_parser().parse_args(["--examples", "--build"])


def test_plot_path_for():
    assert main.plot_path_for("out/fa.png", "nfa") == "out/fa_nfa.png"
    assert main.plot_path_for("fa", "dfa") == "fa_dfa.png"


def test_main_examples(capsys):
    assert main.main(["--examples"]) == 0
    out = capsys.readouterr().out
    assert "(incorrect)" not in out
    assert 'Word "bab" -> accepted (correct)' in out


def test_main_examples_with_plot(tmp_path, capsys):
    target = tmp_path / "fa.png"
    assert main.main(["--examples", "--plot", str(target)]) == 0
    for key in ("dfa", "nfa", "epsilon"):
        assert (tmp_path / f"fa_{key}.png").exists()


def test_menu_loop(capsys):
    answers = ["x", "7", "1", "3"]
    main.menu_loop(input_func=scripted(answers))
    out = capsys.readouterr().out
    assert "Invalid input. Please type a number." in out
    assert "Invalid option, try again." in out
    assert "Accepts a*b" in out
    assert out.rstrip().endswith("Exiting.")


def test_menu_build_session(capsys):
    answers = [
        "2",
        "q0", "q1", "end",
        "q0",
        "a", "end",
        "q0", "a", "q1", "end",
        "end",
        "q1", "end",
        "a", "aa", "quit",
        "3",
    ]
    main.menu_loop(input_func=scripted(answers))
    out = capsys.readouterr().out
    assert "Automaton created:" in out
    assert "  q0 --a--> q1" in out
    assert "Word accepted" in out
    assert "Word rejected" in out


def test_run_handles_eof(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted([]))
    monkeypatch.setattr("sys.argv", ["fasim"])
    with pytest.raises(SystemExit) as excinfo:
        main.run()
    assert excinfo.value.code == 0
    assert "interrupted" in capsys.readouterr().out
