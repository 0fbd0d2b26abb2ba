# pages/calculator.py
from __future__ import annotations
import streamlit as st

from login_client.core.calculator import add, parse_operand
from login_client.core.state import LOGIN, go


def render_calculator():
    st.divider()
    st.markdown("## Hi, I am a Calculator!")
    left, right = st.columns(2)
    with left:
        a = parse_operand(st.text_input("a", value="0", key="calc_a"))
    with right:
        b = parse_operand(st.text_input("b", value="0", key="calc_b"))

    if st.button("sum", key="calc_sum_btn"):
        st.session_state["calc_sum"] = add(a, b)
    st.markdown(f"## sum is {st.session_state.get('calc_sum', 0)}")

    st.button("Back to login", key="calc_back", on_click=lambda: go(st.session_state, LOGIN))
