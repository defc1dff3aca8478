"""
Test suite for the expression calculator

Contains:
- tests/unit/          : Unit tests for each pipeline stage, the domain models,
                         the configuration layer and the Calculator facade
"""
