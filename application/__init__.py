"""
Application Layer for the fitness tracker.

This package contains:
- ports/: Abstract storage interfaces (what the store needs)
- services/: The workout store and progression analytics
- exceptions: Validation, not-found and persistence errors
"""
