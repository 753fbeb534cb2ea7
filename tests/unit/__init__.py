"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O or wall-clock time; use the fakes in `tests.helpers.fakes`.
- Keep tests small, fast, and deterministic.
"""
