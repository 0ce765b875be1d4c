"""Pattern detectors. One module per pattern; each registers itself with @pattern."""
