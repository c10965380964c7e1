import pytest

from shunting_yard_postfix import MismatchedParenthesis, print_trace, trace


def test_trace_columns_and_rows():
    df = trace("(1 + 2) * 3")

    assert list(df.columns) == ["position", "token", "action", "output", "stack"]
    assert df.to_dict("records") == [
        {"position": 0, "token": "(", "action": "open", "output": "", "stack": "("},
        {"position": 1, "token": "1", "action": "number", "output": "1", "stack": "("},
        {"position": 3, "token": "+", "action": "operator", "output": "1", "stack": "( +"},
        {"position": 5, "token": "2", "action": "number", "output": "1 2", "stack": "( +"},
        {"position": 6, "token": ")", "action": "close", "output": "1 2 +", "stack": ""},
        {"position": 8, "token": "*", "action": "operator", "output": "1 2 +", "stack": "*"},
        {"position": 10, "token": "3", "action": "number", "output": "1 2 + 3", "stack": "*"},
        {"position": 11, "token": "*", "action": "drain", "output": "1 2 + 3 *", "stack": ""},
    ]


def test_trace_last_row_is_final_output():
    df = trace("2 ^ 3 ^ 2")

    assert df.iloc[-1]["output"] == "2 3 2 ^ ^"
    assert list(df["action"]).count("drain") == 2


def test_trace_propagates_errors():
    with pytest.raises(MismatchedParenthesis):
        trace("1 + 2)")


def test_print_trace(capsys):
    print_trace("1 + 2")

    out = capsys.readouterr().out
    assert "position" in out
    assert "1 2 +" in out
