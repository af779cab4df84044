"""
Core domain models, calendar arithmetic, and contracts.

This module contains the foundational building blocks that are independent
of the command-line surface (argument parsing, clock, terminal output).
"""
