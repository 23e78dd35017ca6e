"""Benchmark helpers.

The subpackage contains pyperf scripts that time the loop functions on grids
containing degenerate argument configurations.
"""
