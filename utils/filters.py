import streamlit as st

from utils.state import PunctualityChart

TRAIN_TYPE_KEY_PREFIX = "train_type::"


def train_type_key(label: str) -> str:
    return f"{TRAIN_TYPE_KEY_PREFIX}{label}"


def _on_train_type_change(chart: PunctualityChart, label: str):
    chart.selection.toggle(label, bool(st.session_state[train_type_key(label)]))


def _train_type_checkboxes(chart: PunctualityChart, label: str):
    st.sidebar.markdown(f"**{label}**")

    left, right = st.sidebar.columns(2)
    left.button("Select all", key="train_types_all", on_click=chart.selection.select_all)
    right.button("Clear", key="train_types_none", on_click=chart.selection.clear)

    for option in chart.categories:
        key = train_type_key(option)
        # The selection is the source of truth; widgets only mirror it
        st.session_state[key] = option in chart.selection
        st.sidebar.checkbox(
            option,
            key=key,
            on_change=_on_train_type_change,
            args=(chart, option),
        )


def punctuality_sidebar(chart: PunctualityChart):
    st.sidebar.header("Punctuality Filters")
    _train_type_checkboxes(chart, "Select train types to display")


def dq_sidebar():
    st.sidebar.header("Data Quality Tools")
    st.sidebar.checkbox("Show cleaned rows", key="show_table")


def intro_sidebar():
    st.sidebar.header("How to use this app")
    st.sidebar.info("Use the page selector above. Each page only shows the filters it needs.")
