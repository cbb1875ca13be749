"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No network and no files outside ``tmp_path``; use monkeypatch for the environment.
- Prefer behavior-centric assertions over implementation details.
"""
