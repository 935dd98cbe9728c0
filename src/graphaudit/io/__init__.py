from .matrix_reader import MatrixReader

__all__ = ["MatrixReader"]
