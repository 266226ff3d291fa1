"""
Task dashboard backend package.

The derivation engine (notifications, statistics, filtering and calendar
lookup) lives in `src.dashboard.engine`; the FastAPI app serving it is
exposed here for convenience imports if desired.
"""

# Expose FastAPI app at package level (optional import path: src.dashboard.app)
try:
    from .main import app  # noqa: F401
except ImportError:
    # The engine can be used without the web stack installed.
    pass
