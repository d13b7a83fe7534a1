"""ctcompare command-line interface."""
