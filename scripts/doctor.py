"""Environment inspector to help debug cross-OS issues."""

from __future__ import annotations

import platform
import subprocess
import sys
from importlib.util import find_spec


def _try_import(name: str):
    try:
        module = __import__(name)
    except Exception as exc:  # pragma: no cover - diagnostic only
        return None, exc
    return module, None


def _check_networkx():
    nx, err = _try_import("networkx")
    if err:
        return "missing", str(err)
    return "ok", f"version={nx.__version__}"


def _check_pandas():
    pd, err = _try_import("pandas")
    if err:
        return "missing", str(err)
    return "ok", f"version={pd.__version__}"


def _check_package():
    pkg, err = _try_import("bst_swap_search")
    if err:
        return "missing", f"{err} (run `pip install -e .`)"
    return "ok", str(getattr(pkg, "__file__", "namespace"))


def _check_ruff():
    if find_spec("ruff"):
        completed = subprocess.run(
            [sys.executable, "-m", "ruff", "--version"], capture_output=True, text=True
        )
        if completed.returncode == 0:
            return "ok", completed.stdout.strip()
        return "error", completed.stderr.strip()
    return "missing", "ruff not importable"


def main() -> int:
    print("[doctor] platform:", platform.platform())
    print("[doctor] python:", sys.executable)
    print("[doctor] version:", sys.version.split()[0])
    print("[doctor] venv:", sys.prefix)

    for label, check in (
        ("networkx", _check_networkx),
        ("pandas", _check_pandas),
        ("bst_swap_search", _check_package),
        ("ruff", _check_ruff),
    ):
        status, detail = check()
        print(f"[doctor] {label}: {status} ({detail})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
