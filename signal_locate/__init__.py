# signal_locate/__init__.py

from .compositor import overlay
from .density_field import accumulate_field, compute_field, normalize_field
from .gradient import Gradient
from .heatmap_generator import HeatmapGenerator, render

__version__ = "0.1.0"
