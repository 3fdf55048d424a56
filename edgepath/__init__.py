"""Edgepath command-line interface."""
