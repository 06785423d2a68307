# suggestions/tests/__init__.py
"""
Suggestion App Test Suite
=========================

Modules:
--------
- test_engine: Unit tests for the heuristics (priority, estimation, assignee,
  breakdown, exploration, rule tables)
- test_services: Persistence and round-trip tests for the generator entry
  points, input validation, audit records and Celery workers

Running Tests:
--------------
    # Run all suggestion tests
    python manage.py test suggestions

    # Run specific test module
    python manage.py test suggestions.tests.test_engine
"""
