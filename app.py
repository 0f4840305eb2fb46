"""Streamlit orchestrator app.

Responsibilities are delegated to modules under `rlv.ui`:

  rlv.ui.data.load_all           -> station file loading (RLV_STATIONS_FILE / RLV_DATA_ROOT)
  rlv.ui.controls.build_controls -> sidebar station & current level inputs
  rlv.ui.sections.*              -> chart section

Run: streamlit run app.py
"""
from __future__ import annotations

import logging

import streamlit as st

from rlv.ui.data import load_all
from rlv.ui.controls import build_controls
from rlv.ui.sections import render_level_profile

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="Nivel actual", layout="wide")

data = load_all()
if not data.stations:
    st.info(f"No valid stations found in {data.source}.")
    st.stop()

controls = build_controls(data)
render_level_profile(data.stations[controls.station_code], controls.current_level)
