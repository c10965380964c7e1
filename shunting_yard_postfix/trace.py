import pandas as pd

from .postfix import Postfix

COLUMNS = ["position", "token", "action", "output", "stack"]


def trace(text):
    """
    Returns pandas dataframe

    One row per consumed token (spaces excluded) and one per operator
    drained from the stack at the end of the input
    """
    rows = []

    def record(step):
        rows.append(
            [
                step.position,
                step.token,
                step.action,
                " ".join(step.output),
                " ".join(step.stack),
            ]
        )

    Postfix(text, observer=record).parse()

    return pd.DataFrame(rows, columns=COLUMNS)


def print_trace(text):
    s = trace(text).to_string(index=False)

    print(s)
