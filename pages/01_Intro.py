import streamlit as st

from utils.filters import intro_sidebar
from constants import TRAIN_TYPE_COL, OPERATED_COL

st.set_page_config(page_title="Intro & Context", page_icon=":material/train:", layout="wide")

# Page-specific sidebar
intro_sidebar()

st.write("# Introduction & Context")

st.markdown(
    """
This site follows the **number of operated trains per month**, split by **train type**.
Each train type gets its own line and its own color, and the color stays the same whatever
you show or hide, so lines can be compared across selections.
"""
)

st.subheader("How to read this dashboard")
st.markdown(
    f"""
- Open **Operated trains** to see the monthly series. The sidebar lists every `{TRAIN_TYPE_COL}`
  found in the data; all are ticked at first.
- Hover a point to read its month, train type and `{OPERATED_COL}`.
- Unticking every train type is allowed: the chart then keeps its axes and draws no line.
- **Data Quality** lists months missing for a train type and duplicated months.
"""
)

# show current data coverage
catalog = st.session_state.get("filters_catalog", {})
date_min, date_max = catalog.get("date_min"), catalog.get("date_max")
if date_min is not None and date_max is not None:
    st.caption(
        f"Data coverage: **{date_min:%Y-%m} → {date_max:%Y-%m}** (monthly), "
        f"{len(catalog.get('train_types', []))} train types."
    )
