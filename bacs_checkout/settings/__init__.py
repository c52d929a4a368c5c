"""Settings modules: base, dev, prod and test."""
