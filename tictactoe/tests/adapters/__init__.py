"""Tests for adapter implementations.

These tests exercise the in-memory repository and the console
controller/presentation against fakes and patched console input.
"""
