"""
PM Whisperer

Turns a sales-originated feature request into a PM-facing argument,
with a local fallback when the generation service is unavailable.
"""

__version__ = "0.1.0"
