"""Streamlit script entry: `streamlit run app.py`."""

from __future__ import annotations

import sys
from pathlib import Path

# Allow `streamlit run app.py` from a source checkout without installing.
_SRC = Path(__file__).resolve().parent / "src"
if _SRC.is_dir() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from golive_dashboard.ui.app import main  # noqa: E402

main()
