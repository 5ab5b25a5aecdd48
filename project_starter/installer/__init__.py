"""Starter package installation (package-manager subprocess)."""
