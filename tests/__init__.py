"""
Test suite for jtrivia.

This package contains tests for all components of the game:
- Question decoding
- Question source
- Game session
- Configuration
- Command-line loop
"""
