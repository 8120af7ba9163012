"""
SQLForge - Programmatic SQL statement builder.

Builds SELECT/INSERT/UPDATE/DELETE statements from immutable expression
trees and renders them into dialect-specific SQL text plus an ordered list
of bound parameter values.
"""

__version__ = "0.1.0"
