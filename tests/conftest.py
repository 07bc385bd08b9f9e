"""
Pytest configuration for the spotify-web-client test suite.

This module configures the Python path so tests can import the
spotify_api package from src/ without installing it.
"""
import sys
from pathlib import Path

src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))
