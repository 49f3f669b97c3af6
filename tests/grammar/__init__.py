"""
GrammarFix Tests Package
========================
Test suite for the grammar correction engine and its collaborators.

Run all tests: python3 -m pytest tests/grammar/ -v
Run specific: python3 -m pytest tests/grammar/test_rules.py -v
"""

__version__ = "1.0.0"
