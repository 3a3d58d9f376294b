"""scaffoldkit -- front-end project scaffolder driven by an external package manager."""

__version__ = "0.1.0"
