from fastapi import Request

from app.platform_client import CreatorClient
from app.profiles import ProfileRegistry
from app.repositories import JobRepository

# Shared objects live on app.state, created once by the lifespan hook.
# Tests swap them out through app.dependency_overrides.

def get_client(request: Request) -> CreatorClient:
    return request.app.state.client

def get_repository(request: Request) -> JobRepository:
    return request.app.state.repository

def get_profiles(request: Request) -> ProfileRegistry:
    return request.app.state.profiles
