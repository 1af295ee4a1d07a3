"""User-facing interfaces for pretex."""
