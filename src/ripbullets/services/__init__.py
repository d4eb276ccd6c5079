"""Boundary services: block sources, clipboard, notifications and the copy action."""
