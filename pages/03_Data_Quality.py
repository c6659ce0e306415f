import streamlit as st

from utils.filters import dq_sidebar
from utils.quality import duplicate_keys, month_gaps, coverage
from constants import MONTH_COL, TRAIN_TYPE_COL


def analysis_card(title: str, body_md: str, icon: str = ":material/analytics:"):
    with st.container(border=True):
        st.markdown(f"{icon} **{title}**")
        st.markdown(body_md)


st.set_page_config(page_title="Data Quality", page_icon=":material/award_star:", layout="wide")
dq_sidebar()

st.markdown("# Data Quality")
st.caption("Checks on the loaded rows. Nothing here changes what the chart shows.")

df = st.session_state.get("df_clean", None)
if df is None:
    st.error("Data not loaded.")
    st.stop()

# ---------- Coverage ----------
st.subheader("Coverage per train type")
cov = coverage(df)
st.dataframe(
    cov,
    hide_index=True,
    column_config={
        "first_month": st.column_config.DateColumn("First month", format="YYYY-MM"),
        "last_month": st.column_config.DateColumn("Last month", format="YYYY-MM"),
        "rows": st.column_config.NumberColumn("Rows"),
        "total_operated": st.column_config.NumberColumn("Operated trains (total)", format="%d"),
    },
)

c1, c2 = st.columns(2)

# ---------- Gaps ----------
with c1:
    st.subheader("Missing months")
    gaps = month_gaps(df)
    if gaps.empty:
        st.success("Every train type has a row for each month between its first and last month.")
    else:
        st.warning(f"{len(gaps)} month(s) missing. The line is drawn straight across these gaps.")
        st.dataframe(
            gaps,
            hide_index=True,
            column_config={"missing_month": st.column_config.DateColumn("Missing month", format="YYYY-MM")},
        )

# ---------- Duplicates ----------
with c2:
    st.subheader(f"Duplicate {MONTH_COL} × {TRAIN_TYPE_COL}")
    dups = duplicate_keys(df)
    if dups.empty:
        st.success("No month appears twice for the same train type.")
    else:
        st.warning(f"{len(dups)} duplicated key(s). Both rows are plotted, in file order.")
        st.dataframe(dups, hide_index=True)

analysis_card(
    "How to read this",
    """
The source file is used as is: gaps and duplicates are reported here but never filled or merged.
Rows failing the schema (month, train type, count) stop the app at load time instead.
""",
)

if st.session_state.get("show_table"):
    st.subheader("Cleaned rows")
    st.dataframe(df, hide_index=True)
