"""
Utility helpers: logging setup and registry summaries.
"""
