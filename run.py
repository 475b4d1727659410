#!/usr/bin/env python3
"""Run the API server, or the Streamlit dashboard with `run.py dashboard`."""

import subprocess
import sys
from pathlib import Path

import uvicorn

from settings import API_HOST, API_PORT
from settings.logging import setup_logging

if len(sys.argv) > 1 and sys.argv[1] == "dashboard":
    app = Path(__file__).parent / "web" / "streamlit" / "app.py"
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(app)])
else:
    setup_logging()
    uvicorn.run("web.api.app:app", host=API_HOST, port=API_PORT, log_config=None)
