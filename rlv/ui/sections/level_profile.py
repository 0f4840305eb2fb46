from __future__ import annotations
import pandas as pd
import streamlit as st
from typing import Mapping, Optional

from rlv.plots import LABELS, chart_config, level_profile_figure
from rlv.profile import build_level_profile
from rlv.station import StationProfile

__all__ = ["render_level_profile"]


def render_level_profile(station: StationProfile, current_level: Optional[float] = None,
                         labels: Optional[Mapping[str, str]] = None):
    lab = {**LABELS, **(labels or {})}
    fig = level_profile_figure(station, current_level, labels=lab)
    st.plotly_chart(fig, use_container_width=True, config=chart_config(station))

    prof = build_level_profile(station, current_level)
    with st.expander(lab["thresholds"], expanded=False):
        bands = pd.DataFrame({
            "band": [lab["safe"], lab["yellow"], lab["orange"], lab["red"]],
            "cm": list(prof.segments.as_tuple()),
        })
        st.dataframe(bands, hide_index=True, use_container_width=True)
        st.caption(f"{lab['current_level']}: {prof.level:.0f} cm / offset {station.offset:.0f} cm")
