"""UI layer for scroll-window.

Contains:
- blessed: Interactive terminal viewer driven by the estimator
"""

__all__ = []
