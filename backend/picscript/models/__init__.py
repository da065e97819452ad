"""Pydantic models for the scene read interface and the HTTP API."""
