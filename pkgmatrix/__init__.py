"""pkgmatrix — OS package-set resolution for image builds."""

__version__ = "0.1.0"
