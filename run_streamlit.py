"""Command-line entrypoint that starts the Streamlit dashboard."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from streamlit.web import cli as stcli

_PORT_ENV = "GOLIVE_DASHBOARD_PORT"
_HEADLESS_ENV = "GOLIVE_DASHBOARD_HEADLESS"


def _resolve_app_script() -> Path:
    base = Path(__file__).resolve().parent
    script = base / "app.py"
    if script.exists():
        return script
    raise FileNotFoundError(f"Could not find Streamlit entrypoint: {script}")


def _bool_env(name: str, default: bool) -> bool:
    raw = str(os.environ.get(name) or "").strip().lower()
    if not raw:
        return bool(default)
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int_env(name: str, default: int | None) -> int | None:
    raw = str(os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _build_streamlit_argv(script: Path, *, port: int | None, headless: bool) -> list[str]:
    argv = [
        "streamlit",
        "run",
        str(script),
        "--global.developmentMode=false",
        "--server.runOnSave=false",
    ]
    if port is not None:
        argv.extend(
            [
                "--server.address=127.0.0.1",
                f"--server.port={int(port)}",
            ]
        )
    if headless:
        argv.append("--server.headless=true")
    return argv


def _run_streamlit_cli(script: Path, *, port: int | None, headless: bool) -> int:
    if headless:
        os.environ["BROWSER"] = "none"
    sys.argv = _build_streamlit_argv(script, port=port, headless=headless)
    return int(stcli.main() or 0)


def main() -> int:
    script = _resolve_app_script()
    port = _int_env(_PORT_ENV, None)
    if port is not None:
        port = max(1, port)
    return _run_streamlit_cli(script, port=port, headless=_bool_env(_HEADLESS_ENV, False))


if __name__ == "__main__":
    raise SystemExit(main())
