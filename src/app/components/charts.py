# src/app/components/charts.py
import streamlit as st
import plotly.express as px
import polars as pl
from src.utils.logger import logger

log = logger.bind(step="st-charts")


def chart_metrics(df: pl.DataFrame, dt_col: str, metric_cols: list[str], title: str = "Campaign metrics"):
    """
    Generates and displays a daily line chart for the selected metrics.

    Args:
        df (pl.DataFrame): The filtered DataFrame.
        dt_col (str): The name of the date column.
        metric_cols (list[str]): Metric columns to plot.
        title (str): Chart title.
    """
    metric_cols = [c for c in metric_cols if c in df.columns]
    if df.is_empty() or not metric_cols:
        st.info("No data for the selected period.")
        return

    # Unpivot to long format for plotting
    metrics_long = df.select(dt_col, *metric_cols).unpivot(
        index=dt_col, variable_name="Metric", value_name="value"
    )
    chart = px.line(metrics_long, x=dt_col, y="value", color="Metric", title=title, markers=True)
    chart.for_each_trace(lambda t: t.update(name=t.name.replace("_", " ").title()))
    chart.update_traces(hovertemplate="%{y:,.0f}", line=dict(width=1))

    # Customize chart layout
    chart.update_layout(
        xaxis_title=None, yaxis_title=None,
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        margin=dict(l=40, r=40, t=50, b=40),
    )

    st.plotly_chart(chart, use_container_width=True)
    log.debug("Campaign metrics chart rendered.")
