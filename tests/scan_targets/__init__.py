"""Package scanned by the scanner and registrar tests."""
