"""DEPTHSWEEP

Checks that a contract's recursive summation agrees with its iterative
counterpart across a range of recursion depths, and probes the depth at
which the recursive path exhausts its gas budget.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
