"""Matrix Market readers for CSR matrices and vectors, and solver run reports."""

__version__ = "0.1.0"

__all__ = ["csr_matrix", "errors", "output", "vector"]