"""Tests for running the demo seed script by path."""

from __future__ import annotations

import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

SEED_SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "seed_demo.py"


class SeedScriptTests(unittest.TestCase):
    def test_script_imports_package_when_run_from_another_directory(self) -> None:
        with tempfile.TemporaryDirectory() as workdir:
            result = subprocess.run(
                [sys.executable, str(SEED_SCRIPT), "--help"],
                cwd=workdir,
                capture_output=True,
                text=True,
                timeout=60,
            )

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertIn("--no-reset", result.stdout)


if __name__ == "__main__":
    unittest.main()
