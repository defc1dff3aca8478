"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the calculator
that are independent of the evaluation pipeline: symbol models, IEEE-754
arithmetic, the error taxonomy and the configuration contract.
"""
