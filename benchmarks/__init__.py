"""Performance benchmarks for densepath.

Microbenchmarks for the labeling engine on dense matrices of growing size.
"""
