"""
Launcher for the tag dashboard.

Run as a console script, it replaces the current process with
``python -m streamlit run`` on this file and forwards the dashboard options after
``--``. Run by Streamlit itself, it configures logging from DashboardSettings and
renders dashboard.ui.streamlit_app.

Usage:
    - Console script:
        tagdash-app --data data/QueryResults.csv --top-n 8

    - Under Streamlit:
        streamlit run src/dashboard/main.py -- --data data/QueryResults.csv
"""

from __future__ import annotations

import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path

from dashboard.ui import streamlit_app
from tagdash.io import DashboardSettings


def _parser(*, add_help: bool = True) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Tag Dashboard", add_help=add_help)
    p.add_argument("--data", default=None, help="Dataset CSV (TagName, PostId, CreationDate, ...)")
    p.add_argument(
        "--top-n",
        dest="top_n",
        type=int,
        default=None,
        help="Number of tags tracked individually in the timeline.",
    )
    return p


def _configure_logging() -> None:
    level = DashboardSettings.load().log_level
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))


def _streamlit_command(data: str | None, top_n: int | None) -> list[str]:
    cmd = [sys.executable, "-m", "streamlit", "run", str(Path(__file__).resolve())]
    forwarded: list[str] = []
    if data:
        forwarded += ["--data", data]
    if top_n is not None:
        forwarded += ["--top-n", str(int(top_n))]
    return cmd + ["--"] + forwarded if forwarded else cmd


def main(argv: list[str] | None = None) -> None:
    """Console entrypoint.

    Renders in-process when STREAMLIT_SERVER_PORT is set (the script is already
    running under a Streamlit server); otherwise hands the process over to Streamlit.

    Args:
        argv (list[str] | None): CLI arguments; sys.argv[1:] when None.
    """
    ns = _parser().parse_args(list(sys.argv[1:] if argv is None else argv))

    if os.environ.get("STREAMLIT_SERVER_PORT"):
        _configure_logging()
        streamlit_app(default_data=ns.data, default_top_n=ns.top_n)
        return

    cmd = _streamlit_command(ns.data, ns.top_n)
    try:
        os.execv(sys.executable, cmd)
    except OSError:
        # execv is unavailable on some platforms; run streamlit as a child instead
        subprocess.run(cmd, check=False)


if __name__ == "__main__":
    _configure_logging()
    # Streamlit may forward its own flags too; only pick up ours
    known, _ = _parser(add_help=False).parse_known_args(sys.argv[1:])
    streamlit_app(default_data=known.data, default_top_n=known.top_n)
