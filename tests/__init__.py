"""
Tests for the Quake 3 Arena log parser.

This package contains tests for:
- Line tokenization and kill-line decomposition
- Signal extraction and game segmentation
- Per-game aggregation and report rendering
- Configuration loading and the command-line interface
"""
