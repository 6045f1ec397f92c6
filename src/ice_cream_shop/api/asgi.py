"""ASGI entrypoint for the ice cream shop API."""

from ice_cream_shop.api.app import create_app
from ice_cream_shop.containers import build_container

app = create_app(build_container())
