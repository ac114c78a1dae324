"""
Test package for artefact_sources.

Present so tests can import shared helpers from tests.conftest.
"""
