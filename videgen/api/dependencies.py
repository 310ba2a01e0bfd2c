"""
Shared dependencies for API routes.

The app factory puts the configuration and the wired pipeline on app.state;
routes reach them through these providers so tests can swap either one.
"""
from fastapi import Request

from videgen.config import AppConfig
from videgen.services import Pipeline


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_pipeline(request: Request) -> Pipeline:
    return request.app.state.pipeline
