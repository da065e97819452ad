"""Geometry resolvers: turn an item's given constraints into absolute coordinates."""
