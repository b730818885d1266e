"""Shared UI configuration."""
