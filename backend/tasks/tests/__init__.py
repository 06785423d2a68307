# tasks/tests/__init__.py
"""
Task App Test Suite
===================

Modules:
--------
- test_selectors: Historical completion samples and recent-task queries

Running Tests:
--------------
    python manage.py test tasks
"""
