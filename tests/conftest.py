"""Shared pytest setup"""
import sys
from pathlib import Path

# Make the repository root importable (portpicker, tests.fixtures)
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))
