import streamlit as st
import polars as pl

from pathlib import Path

from src.utils.logger import logger

log = logger.bind(step="st-data_loader")


def read_campaign_csv(path: str | Path, dt_col: str = "DATE") -> pl.DataFrame:
    """
    Reads campaign metrics from CSV, parsing `dt_col` as a Date and sorting by it.
    """
    path = Path(path)
    if not path.exists():
        log.warning(f"No campaign data at {path}")
        return pl.DataFrame()

    df = (
        pl.read_csv(path, schema_overrides={dt_col: pl.String})
        .with_columns(pl.col(dt_col).str.strptime(pl.Date, format="%Y-%m-%d", strict=False))
        .drop_nulls(subset=[dt_col])
        .sort(dt_col)
    )
    log.debug(f"Loaded {df.height} rows from {path}")
    return df


def load_campaign_data(path: str | Path, dt_col: str = "DATE") -> pl.DataFrame:
    """
    Loads campaign data, using Streamlit's session cache.

    The file's modification time is the data version; the cached frame is
    refreshed when it changes.
    """
    path = Path(path)
    data_version_new = path.stat().st_mtime if path.exists() else None

    df = st.session_state.get("campaign_df")
    data_version_cached = st.session_state.get("campaign_data_version")

    if df is None or data_version_cached != data_version_new:
        df = read_campaign_csv(path, dt_col=dt_col)
        st.session_state["campaign_df"] = df
        st.session_state["campaign_data_version"] = data_version_new
        log.debug("Cached new campaign data.")
    else:
        log.debug("Loaded cached campaign data.")

    return df
