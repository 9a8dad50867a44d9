"""Dense matrices of floats with arithmetic, minors, transposition, determinants, cofactors and inverses."""

__version__ = "0.1.0"