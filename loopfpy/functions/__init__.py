"""Low-level numerical helpers and special functions.

This subpackage contains the floating-point comparison helpers and the
dilogarithm/Clausen kernels used by every loop-function family.
"""
