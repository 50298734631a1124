#!/usr/bin/env python
"""Run the ShapeDraw suite with coverage.

The test modules sit at the repository root, one per component
(``test_geometry.py``, ``test_shape_store.py``, ``test_interaction.py``,
``test_renderer.py``, ``test_canvas.py``) plus ``test_packaging.py``.
``conftest.py`` forces the offscreen Qt platform and shares a single
``QApplication``. Extra arguments are passed straight to pytest, e.g.
``python test.py -k arrow``.
"""

import sys
import subprocess


def main(argv=None):
    cmd = [
        sys.executable,
        "-m",
        "pytest",
        "--cov=shapedraw",
        "--cov-report=term-missing",
        "--cov-report=html",
        "-v",
        *(sys.argv[1:] if argv is None else argv),
    ]

    print("Running ShapeDraw tests with coverage...\n")
    result = subprocess.run(cmd)

    if result.returncode == 0:
        print("\n✓ All tests passed!")
        print("Coverage report: htmlcov/index.html")
    else:
        print("\n✗ Tests failed!")

    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
