"""Unit tests for nimbridge.

Unit tests verify individual components in isolation using mocks.
No nim installation is required.
"""
