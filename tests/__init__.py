# blockfork Test Suite
"""
Test suite including:
- Unit tests
- Integration tests
- Invalid input tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
