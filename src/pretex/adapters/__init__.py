"""Adapters binding the core pipeline to concrete output formats."""
