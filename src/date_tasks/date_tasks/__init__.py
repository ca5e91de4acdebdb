"""Date Tasks package.

This package is organized by feature modules (parsing, calendar_rules, timespan,
clock) on top of small shared core/common layers. The public functions are
collected in `tasks.py`.
"""
