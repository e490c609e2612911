"""aeon application layer: HTTP API, services and configuration wiring."""

from importlib import import_module

from fastapi import FastAPI


def create_app() -> FastAPI:
    """Build the API without importing route modules at package import time."""
    return import_module("app.main").create_app()


__all__ = ["create_app"]
