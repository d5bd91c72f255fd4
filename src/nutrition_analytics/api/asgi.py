"""ASGI entrypoint for the nutrition analytics API."""

from nutrition_analytics.api.app import create_app
from nutrition_analytics.containers import build_container

app = create_app(build_container())
