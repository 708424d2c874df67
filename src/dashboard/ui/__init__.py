"""
Dashboard UI package.

Modules:
    - app: Streamlit application orchestrator (streamlit_app).
    - helpers: Small cross-cutting helpers (accelerators, labels, coordinator wiring).

Usage:
    from dashboard.ui import streamlit_app
    streamlit_app(default_data="posts.csv")
"""

from __future__ import annotations

from .app import streamlit_app

__all__ = [
    "streamlit_app",
]
