"""
Test suite for colortty - color scheme converter for alacritty.

This package contains:
- Unit tests for colors, the scheme model, parsers and serializers
- Integration tests for the conversion pipeline, providers and CLI
- Edge case tests for malformed input
"""
