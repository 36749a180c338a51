# app.py

import os
import sys
from typing import List, Dict, Optional

import pandas as pd
import streamlit as st
from streamlit.runtime.scriptrunner import get_script_run_ctx

from core.logger import log_solve, load_history, clear_history
from core.solver import solve_equation_local
from utils import messages

APP_TITLE = os.environ.get("EASYMATH_TITLE", "EasyMath")


# ---------------------------
# Helpers shared by UI and CLI
# ---------------------------
def history_entry(question: str, res: Dict) -> Dict:
    return {"equation": question, "answer": res["answer"], "kind": res["kind"]}


def solve_and_log(question: str, logfile: Optional[str] = None) -> Optional[Dict]:
    res = solve_equation_local(question)
    if res is not None:
        log_solve(history_entry(question, res), logfile=logfile)
    return res


def batch_solve(df: pd.DataFrame, column: str = "equation") -> pd.DataFrame:
    """Solve every row of `column`; returns equation / answer / kind columns."""
    if column not in df.columns:
        raise KeyError(f"CSV must contain column named '{column}'.")
    rows: List[Dict] = []
    for q in df[column].fillna("").astype(str).tolist():
        res = solve_equation_local(q)
        if res is None:
            rows.append({"equation": q, "answer": messages.ENTER_EQUATION, "kind": "empty"})
        else:
            rows.append(history_entry(q, res))
    return pd.DataFrame(rows, columns=["equation", "answer", "kind"])


# ---------------------------
# UI: Streamlit
# ---------------------------
def run_streamlit():
    st.set_page_config(page_title=APP_TITLE, layout="wide")
    st.title(f"🧮 {APP_TITLE}")
    st.caption("Linear and quadratic equations in one unknown, e.g. 2x+3=7 or x2-4x+4=0")

    left_col, right_col = st.columns([2, 1])
    with left_col:
        equation = st.text_input("Equation", placeholder="e.g. 2x+3=7 or x2-4=0", key="equation")
        show_steps = st.checkbox("Show steps", value=True)

        if st.button("Solve", key="solve"):
            if not equation or not equation.strip():
                st.error(messages.ENTER_EQUATION)
            else:
                res = solve_and_log(equation)
                if "error" in res:
                    st.error(res["answer"])
                else:
                    st.subheader("Result")
                    st.success(res["answer"])
                    if res.get("checked") is False:
                        st.warning(messages.STEP_CHECK_FAILED)
                if show_steps:
                    st.subheader("Steps")
                    for s in res.get("steps", []):
                        st.write("-", s)

        st.markdown("---")
        st.markdown("### Solve a CSV of equations")
        uploaded = st.file_uploader("Upload CSV with column 'equation'", type=["csv"])
        if uploaded is not None:
            try:
                df = pd.read_csv(uploaded)
                res_df = batch_solve(df)
            except (KeyError, ValueError, pd.errors.ParserError) as e:
                st.error(f"Error reading CSV: {e}")
            else:
                st.dataframe(res_df)
                st.download_button(
                    "Download results CSV",
                    data=res_df.to_csv(index=False),
                    file_name="easymath_results.csv",
                    mime="text/csv",
                )

    with right_col:
        st.markdown("### History")
        if st.button("Clear history", key="clear_history"):
            if not clear_history():
                st.error("Could not remove the history file.")
        history = load_history()
        if not history:
            st.write("No solved equations yet.")
        else:
            for h in history:
                with st.expander(f"{str(h.get('ts', ''))[:19]} — {str(h.get('equation', ''))[:60]}"):
                    st.write(h.get("answer", ""))


# ---------------------------
# CLI fallback
# ---------------------------
def run_cli():
    print(f"{APP_TITLE} — CLI mode")
    print("Examples: 2x+3=7   x2-4=0   x2+1=0")
    print("Type 'exit' or Ctrl+C to quit.")
    while True:
        try:
            q = input("\nEquation: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            return
        if not q:
            continue
        if q.lower() in ("exit", "quit"):
            print("Goodbye!")
            return
        res = solve_and_log(q)
        print("Answer:", res["answer"])
        print("Steps:")
        for s in res["steps"]:
            print("-", s)


# ---------------------------
# Entry point
# ---------------------------
if __name__ == "__main__":
    if get_script_run_ctx() is not None:
        run_streamlit()
    else:
        print("Not running under Streamlit — CLI mode. For the web UI: streamlit run APP.py", file=sys.stderr)
        run_cli()
