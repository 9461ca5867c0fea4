"""
Shared endpoint dependencies.
"""
from fastapi import Request

from bridge.adapter import PodioAdapter


def get_adapter(request: Request) -> PodioAdapter:
    """Adapter attached to the application at startup"""
    return request.app.state.adapter
