"""Utility modules for taiga-selector.

- logging: Logger setup shared by CLI and library code
- output: Shared rich console and JSON printing
"""
