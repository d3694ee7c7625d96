"""Prompt specs, the resolution loop and console adapters."""
