"""Write a station's level-profile chart to a standalone HTML file.

Run: python -m rlv.export --code 12345 --level 250 --out chart.html
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from rlv.data import load_profile_csv, load_stations, validate_station
from rlv.paths import default_stations_path
from rlv.plots import chart_config, level_profile_figure


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Export a river cross-section level chart to HTML.")
    parser.add_argument("--code", required=True, help="Station code")
    parser.add_argument("--stations", type=Path, default=None, help="Stations JSON file (defaults to RLV_STATIONS_FILE or data/stations.json)")
    parser.add_argument("--level", type=float, default=None, help="Current level in cm (defaults to half the station offset)")
    parser.add_argument("--profile-csv", type=Path, default=None, help="Replace the station cross-section with x/y samples from a CSV")
    parser.add_argument("--out", type=Path, default=None, help="Destination HTML file (defaults to nivel_<code>.html)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging verbosity")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper()))
    log = logging.getLogger(__name__)

    stations_path = args.stations if args.stations is not None else default_stations_path()
    stations = load_stations(stations_path)
    station = stations.get(args.code)
    if station is None:
        parser.error(f"Unknown station code {args.code!r} in {stations_path}")

    if args.profile_csv is not None:
        try:
            x, y = load_profile_csv(args.profile_csv)
            station = replace(station, x=x, y=y)
            validate_station(station)
        except (OSError, ValueError) as exc:
            parser.error(str(exc))
        log.info("Using cross-section from %s (%d samples)", args.profile_csv, len(x))

    out = args.out if args.out is not None else Path(f"nivel_{station.code}.html")
    fig = level_profile_figure(station, args.level)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(out), include_plotlyjs="cdn", config=chart_config(station))
    log.info("Wrote chart for station %s to %s", station.code, out)
    print(f"Chart written to {out}")


if __name__ == "__main__":  # pragma: no cover
    main()
