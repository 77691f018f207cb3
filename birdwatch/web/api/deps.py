"""
Dependency Injection for the web proxy API.

Manage request handler dependencies using FastAPI Depends.
"""

from typing import Annotated

from fastapi import Depends, Request
from httpx import AsyncClient

from birdwatch.common.core.http_client import HttpClientFactory

from ..config import WebConfig
from ..core.locator import BackendLocator, host_from_headers


# ==========================================
# 1. Service Accessors
# ==========================================


def get_config(request: Request) -> WebConfig:
    return request.app.state.config


def get_http_client(request: Request) -> AsyncClient:
    return request.app.state.http_client


def get_http_client_factory(request: Request) -> HttpClientFactory:
    return request.app.state.http_client_factory


def get_locator(request: Request) -> BackendLocator:
    return request.app.state.locator


ConfigDep = Annotated[WebConfig, Depends(get_config)]
HttpClientDep = Annotated[AsyncClient, Depends(get_http_client)]
HttpClientFactoryDep = Annotated[HttpClientFactory, Depends(get_http_client_factory)]
LocatorDep = Annotated[BackendLocator, Depends(get_locator)]


# ==========================================
# 2. Logic Dependencies
# ==========================================


def resolve_backend_base(request: Request, locator: LocatorDep) -> str:
    """
    Resolve the backend base URL for the current request host.
    """
    return locator.locate(host_from_headers(request.headers))


BackendBaseDep = Annotated[str, Depends(resolve_backend_base)]
