"""Command-line helpers for linux_errno."""
