import json
from pathlib import Path

import pandas as pd
import pytest
from streamlit.testing.v1 import AppTest

import APP
from core.logger import load_history


def test_batch_solve():
    df = pd.DataFrame({"equation": ["2x+3=7", "0=0", "", "x2+1=0"]})
    out = APP.batch_solve(df)
    assert list(out.columns) == ["equation", "answer", "kind"]
    assert out["answer"].tolist() == [
        "Solution: x = 2",
        "No variable found in the equation.",
        "Enter a valid equation.",
        "Two complex solutions: x1 = 0 + 1i, x2 = 0 - 1i",
    ]
    assert out["kind"].tolist() == ["one_real_root", "no_variable", "empty", "two_complex_roots"]


def test_batch_solve_missing_values():
    df = pd.DataFrame({"equation": ["x=1", None]})
    out = APP.batch_solve(df)
    assert out["kind"].tolist() == ["one_real_root", "empty"]


def test_batch_solve_requires_column():
    with pytest.raises(KeyError):
        APP.batch_solve(pd.DataFrame({"question": ["x=1"]}))


def test_solve_and_log_writes_history(tmp_path):
    logfile = str(tmp_path / "history.jsonl")
    res = APP.solve_and_log("x2-4x+4=0", logfile=logfile)
    assert res["answer"] == "One real solution: x = 2"
    entry = load_history(logfile=logfile)[0]
    assert entry["equation"] == "x2-4x+4=0"
    assert entry["answer"] == "One real solution: x = 2"
    assert entry["kind"] == "one_real_root"
    assert APP.solve_and_log("  ", logfile=logfile) is None
    assert len(load_history(logfile=logfile)) == 1


def test_cli_loop(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("EASYMATH_LOGFILE", str(tmp_path / "cli.jsonl"))
    inputs = iter(["2x+3=7", "", "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    APP.run_cli()
    out = capsys.readouterr().out
    assert "Answer: Solution: x = 2" in out
    assert "Goodbye!" in out


APP_PATH = str(Path(__file__).resolve().parent.parent / "APP.py")


def test_streamlit_page_solves_equation(tmp_path, monkeypatch):
    monkeypatch.setenv("EASYMATH_LOGFILE", str(tmp_path / "ui.jsonl"))
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    assert not at.exception

    at.text_input(key="equation").input("2x+3=7")
    at.button(key="solve").click()
    at.run()

    assert not at.exception
    assert at.success[0].value == "Solution: x = 2"
    assert load_history(logfile=str(tmp_path / "ui.jsonl"))[0]["equation"] == "2x+3=7"
    assert any("2x+3=7" in e.label for e in at.expander)


def test_streamlit_page_shows_errors(tmp_path, monkeypatch):
    monkeypatch.setenv("EASYMATH_LOGFILE", str(tmp_path / "ui.jsonl"))
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    at.text_input(key="equation").input("0=0")
    at.button(key="solve").click()
    at.run()

    assert not at.exception
    assert at.error[0].value == "No variable found in the equation."


def test_streamlit_history_tolerates_odd_entries(tmp_path, monkeypatch):
    logfile = tmp_path / "ui.jsonl"
    logfile.write_text(
        json.dumps({"ts": 12345, "equation": None, "answer": "Solution: x = 1"}) + "\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("EASYMATH_LOGFILE", str(logfile))
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()

    assert not at.exception
    assert at.expander[0].label.startswith("12345")
