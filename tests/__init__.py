"""
Test suite for ptime

Contains:
- tests/unit/          : Unit tests for calendar engines, PersianDateTime,
                         formatter, clock and JSON contracts
"""
