"""Leaf helpers with no engine imports."""
