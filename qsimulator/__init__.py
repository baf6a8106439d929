"""State-vector quantum circuit simulator with QFT arithmetic and Shor's algorithm."""

__version__ = "0.1.0"
__all__ = ["matrix", "statevector", "arithmetic", "system", "addition", "shor"]