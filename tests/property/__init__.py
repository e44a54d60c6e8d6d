"""Property-based testing for cellframe generators.

This package contains property-based tests using the Hypothesis library to
check the invariants every generated cell, column and series must hold.
"""
