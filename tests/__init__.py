"""
Test suite for hyperoperation

Contains:
- tests/unit/          : Unit tests for individual modules
"""
