"""
Resolution and registry of language components and clustering algorithms.
"""
