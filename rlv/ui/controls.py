from __future__ import annotations
import streamlit as st
from .state import Controls, LoadedData
from rlv.profile import effective_level

__all__ = ["build_controls"]


def build_controls(data: LoadedData) -> Controls:
    st.sidebar.header("Estación")
    codes = sorted(data.stations)
    station_code = st.sidebar.selectbox(
        "Código",
        codes,
        index=0,
        format_func=lambda c: f"{c} - {data.stations[c].location}",
    )
    station = data.stations[station_code]

    st.sidebar.header("Nivel actual")
    use_default = st.sidebar.checkbox(
        "Usar nivel por defecto", value=True,
        help="Half of the station offset when no reading is available"
    )
    current_level = None
    if not use_default:
        current_level = st.sidebar.number_input(
            "Nivel (cm)", min_value=0.0, max_value=float(station.offset),
            value=effective_level(station), step=1.0,
        )

    return Controls(
        station_code=str(station_code),
        current_level=None if current_level is None else float(current_level),
    )
