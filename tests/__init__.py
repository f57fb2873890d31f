"""
Test suite for geoangles

Contains:
- tests/unit/          : Unit tests for parser, converter, formatter and models
"""
