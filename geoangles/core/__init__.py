"""
Core domain models and numeric primitives.

This module contains the foundational building blocks shared by the
parser, converter and formatter.
"""
