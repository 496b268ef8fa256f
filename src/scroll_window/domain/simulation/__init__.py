"""
Simulation domain module.

Provides a deterministic stand-in for a rendering host and row height
models, for exercising the estimator through whole render cycles.
"""

from .heights import (
    generate_row_texts,
    random_heights,
    uniform_heights,
    wrapped_line_heights,
)
from .host import Frame, SimulatedHost
