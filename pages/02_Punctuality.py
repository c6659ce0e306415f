import streamlit as st

from utils.filters import punctuality_sidebar
from utils.prep import train_types
from utils.state import chart_state

# ---------- Page setup ----------
st.set_page_config(page_title="Operated trains", page_icon=":material/show_chart:", layout="wide")

st.markdown("# Operated trains per month")
st.caption("One line per train type. Tick or untick train types in the sidebar to compare them.")

# ---------- Load & guardrails ----------
df = st.session_state.get("df_clean", None)
if df is None:
    st.error("Data not loaded.")
    st.stop()

categories = st.session_state.get("filters_catalog", {}).get("train_types") or train_types(df)
chart = chart_state(df, categories)

punctuality_sidebar(chart)

# ---------- Chart ----------
series = chart.series.value
if series.empty:
    st.info("No train type selected: tick at least one in the sidebar to draw its line.", icon=":material/info:")

st.plotly_chart(chart.figure.value, key="operated_trains_chart")

with st.expander("Rows behind the chart"):
    st.dataframe(series, hide_index=True)
