import json

import pytest

from rlv.station import StationProfile


@pytest.fixture
def station():
    return StationProfile(
        code="H0001",
        location="Puente Principal",
        x=[0.0, 1.0, 2.0],
        y=[0.0, 0.5, 0.0],
        yellow=400.0,
        orange=300.0,
        red=200.0,
        offset=500.0,
    )


@pytest.fixture
def record():
    return {
        "codigo": "H0002",
        "ubicacion": "Aguas Abajo",
        "x": ["0", "1.5", "3"],
        "y": ["2.0", "0.4", "2.1"],
        "umbral_amarillo": 250,
        "umbral_naranja": 200,
        "umbral_rojo": 120,
        "offset": 300,
    }


@pytest.fixture
def stations_file(tmp_path, record):
    bad = dict(record, codigo="BAD", umbral_rojo=260)  # red above orange
    short = dict(record, codigo="SHORT", y=["1.0"])
    path = tmp_path / "stations.json"
    path.write_text(json.dumps([record, bad, short]), encoding="utf-8")
    return path
