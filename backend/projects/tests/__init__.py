# projects/tests/__init__.py
"""
Project App Test Suite
======================

- test_selectors: Membership and candidate roster queries
"""
