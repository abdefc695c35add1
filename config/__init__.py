"""Konfiguration (Pydantic-Schema + YAML-Manager)."""
