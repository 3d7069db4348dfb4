# tests\__init__.py
"""
Test Suite for Plural Architect

Organization:
- module-level tests per component (numbers, nouns, verbs, options, ...).
- `test_container.py` / `test_cli.py` exercise the wiring end to end.
"""
