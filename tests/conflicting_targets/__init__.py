"""Package whose second module re-registers a contract the first one owns."""
