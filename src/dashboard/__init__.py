from __future__ import annotations

"""
Top-level Streamlit app package.

This package hosts the interactive tag dashboard (Streamlit) decoupled from the
tagdash.* library modules. Cross-filtering, transforms and charts live under
tagdash.*; the Streamlit UI shell and app-specific helpers live here.

CLI entrypoint (configured in pyproject.toml):
    tagdash-app = dashboard.main:main
"""
