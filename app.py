import streamlit as st
from pathlib import Path

# Import project modules
from utils.state import init_state
from utils.io import (
    resolve_data_path,
    parquet_path_for,
    load_csv_comma,
    maybe_read_parquet,
    write_parquet,
    cache_is_fresh,
    file_mtime,
)
from utils.prep import clean, filter_values
from utils.site import page_icon, page_path, render_header, render_footer
from site_config import SITE

# Page config
st.set_page_config(
    page_title=SITE.title,
    page_icon=page_icon(SITE),
    layout="wide",
)

# Sidebar Logo
with st.sidebar:
    logo_path = Path("assets/logo.png")
    if logo_path.exists():
        st.logo(str(logo_path), icon_image=str(logo_path))

# Initialize Session State
init_state()

# Load data once per session
if "df_clean" not in st.session_state:
    # File paths
    DATA_CSV_PATH = resolve_data_path()
    PARQUET_PATH = parquet_path_for(DATA_CSV_PATH)

    dfp = None
    # Use the Parquet cache unless the CSV changed since it was written
    if cache_is_fresh(PARQUET_PATH, DATA_CSV_PATH):
        try:
            dfp = maybe_read_parquet(PARQUET_PATH, file_mtime(PARQUET_PATH))
        except Exception as e_pq:
            st.warning(f"Could not load Parquet cache ({PARQUET_PATH.name}): {e_pq}. Processing raw data.")
            dfp = None

    if dfp is None:
        if not DATA_CSV_PATH.exists():
            st.error(f"Raw data file missing at `{DATA_CSV_PATH}`. Place the CSV there or set the path in the environment.")
            st.stop()

        # Load and clean the CSV; any failure here is fatal for the page
        try:
            df_raw = load_csv_comma(DATA_CSV_PATH, file_mtime(DATA_CSV_PATH))
            with st.spinner("Cleaning and preparing data..."):
                df_clean = clean(df_raw)
        except Exception as load_error:
            st.error(f"Failed to load CSV file: {load_error}")
            st.stop()

        # Attempt to save cleaned data to Parquet
        try:
            write_parquet(df_clean, PARQUET_PATH)
        except Exception as write_error:
            st.warning(f"Could not save Parquet cache ({PARQUET_PATH.name}): {write_error}")

    else:
        df_clean = dfp

    # Store and prepare filters
    st.session_state.df_clean = df_clean
    st.session_state.filters_catalog = filter_values(df_clean)

# Pages navigation
pages = [
    st.Page(page_path(SITE, "01_Intro.py"),        title="Intro & Context", icon=":material/train:", default=True),
    st.Page(page_path(SITE, "02_Punctuality.py"),  title="Operated trains", icon=":material/show_chart:"),
    st.Page(page_path(SITE, "03_Data_Quality.py"), title="Data Quality",    icon=":material/award_star:"),
]
pg = st.navigation(pages, position="sidebar" if SITE.sidebar else "hidden")

render_header(SITE)

# Run the selected page
pg.run()

render_footer(SITE, pages, pg)
