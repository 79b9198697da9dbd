"""
Core numeric contract, evaluation algorithm, and expression model.

This module contains the foundational building blocks that are independent
of any concrete numeric type.
"""
