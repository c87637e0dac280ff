"""
Infrastructure Layer

Adapters for the logging backends plus configuration loading and
process-level logging setup.
"""
