"""Test utilities for lang router plugin tests."""
