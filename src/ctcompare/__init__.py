"""ctcompare — Azimuth vs ASCT+B cell type comparison."""

__version__ = "0.1.0"
