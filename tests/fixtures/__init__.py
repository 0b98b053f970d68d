"""
Test Fixtures and Utilities

Fakes for external dependencies shared across the test suite.
"""
