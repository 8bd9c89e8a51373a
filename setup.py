"""
Build script for indenthtml with optional mypyc compilation.

Usage:
    # Pure Python build (default)
    python -m build

    # Compiled with mypyc
    INDENTHTML_USE_MYPYC=1 pip install .
"""

import os
import sys
from pathlib import Path

from setuptools import setup

USE_MYPYC = os.environ.get("INDENTHTML_USE_MYPYC", "0") == "1"

# Modules on the per-node hot path.
# Note: tree.py is excluded, it works on untyped parser nodes through getattr.
MYPYC_MODULES = [
    "src/indenthtml/render.py",
    "src/indenthtml/normalize.py",
    "src/indenthtml/markup.py",
]


def build_with_mypyc() -> list:
    """Build extension modules using mypyc."""
    try:
        from mypyc.build import mypycify
    except ImportError:
        print(
            "ERROR: mypyc is not installed. Install with: pip install mypy",
            file=sys.stderr,
        )
        print("Or install with mypyc support: pip install indenthtml[mypyc]", file=sys.stderr)
        sys.exit(1)

    for module_path in MYPYC_MODULES:
        if not Path(module_path).exists():
            print(f"ERROR: Module not found: {module_path}", file=sys.stderr)
            sys.exit(1)

    print(f"Compiling {len(MYPYC_MODULES)} modules with mypyc:")
    for module in MYPYC_MODULES:
        print(f"  - {module}")

    opt_level = os.environ.get("MYPYC_OPT_LEVEL", "3")
    debug_level = os.environ.get("MYPYC_DEBUG_LEVEL", "0")

    mypyc_options = {
        "opt_level": opt_level,
        "debug_level": debug_level,
        "verbose": True,
        "separate": False,
        "multi_file": False,
    }

    return mypycify(MYPYC_MODULES, **mypyc_options)


if __name__ == "__main__":
    ext_modules = []

    if USE_MYPYC:
        ext_modules = build_with_mypyc()

    setup(
        ext_modules=ext_modules,
    )
