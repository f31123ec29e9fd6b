import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../..")))

import streamlit as st

from src.utils.logger import logger
from src.utils.config import load_config, date_filter_config

from src.app.utils.data_loader import load_campaign_data
from src.app.utils.helpers import bounds_from_frame, filter_by_range
from src.app.components.date_filter import date_filter
from src.app.components.charts import chart_metrics


log = logger.bind(step="streamlit", component="app")
log.info("Streamlit app loading...")

# --- Page Config ---
st.set_page_config(
    page_title="Campaign Dashboard",
    layout="wide",
)

# --- Load config ---
config = load_config(config_path=os.environ.get("DATE_FILTER_CONFIG", "conf/config.json"))
app_config = config.get("app", {})
data_config = config.get("data", {})
filter_config = date_filter_config(config)

DATA_PATH = data_config.get("path", "data/campaign_metrics.csv")
DT_COL = data_config.get("datetime_col", "DATE")
METRIC_COLS = data_config.get("metric_cols", ["IMPRESSIONS", "CLICKS", "CONVERSIONS"])


# --------------------------
# Load Data
# --------------------------
df = load_campaign_data(DATA_PATH, dt_col=DT_COL)
if df.is_empty():
    st.warning("No data found.")
    st.stop()

bounds = bounds_from_frame(df, dt_col=DT_COL)


# --------------------------
# Layout
# --------------------------

st.title(app_config.get("title", "Campaign Dashboard"))
st.caption(f"Data available from {bounds.min_date} to {bounds.max_date}.")

date_range = date_filter(bounds, filter_config)
df = filter_by_range(df, date_range, dt_col=DT_COL)


# --- Visuals ---
col1, col2 = st.columns([3, 1])
with col1:
    chart_metrics(df, dt_col=DT_COL, metric_cols=METRIC_COLS)
with col2:
    for metric in METRIC_COLS:
        if metric in df.columns:
            st.metric(metric.replace("_", " ").title(), f"{df[metric].sum():,.0f}")

log.info("Streamlit app loaded.")
