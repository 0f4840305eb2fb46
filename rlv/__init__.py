"""River Level Viewer (rlv) package.

Cross-section level chart for river gauging stations.

Modules:
  station: station profile / threshold data model
  profile: station geometry -> plotted dataset, axis bounds, threshold bands
  plots: interactive Plotly figure
  data: station file loading and validation
  paths: data locations and environment overrides
  export: command-line HTML export
"""

from . import station, profile, plots, data, paths  # noqa: F401

__all__ = [
	"station",
	"profile",
	"plots",
	"data",
	"paths",
]
