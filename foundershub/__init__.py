"""Founders Hub: status board, updates feed, and polls for startup founders."""
