#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

Services are built once per process from the loaded configuration.
Tests replace them with app.dependency_overrides.
"""

from functools import lru_cache
from typing import Callable, ContextManager

from core.config_loader import AppConfig, load_config
from core.verification import VerificationGate
from etl.orchestrator import ResumeTrustService


@lru_cache()
def get_config() -> AppConfig:
    """Get the cached application configuration."""
    return load_config()


@lru_cache()
def get_verification_gate() -> VerificationGate:
    """
    The process-wide gate. It must be shared so its per-phone locks
    serialise concurrent requests for the same phone.
    """
    return VerificationGate(get_config().verification)


@lru_cache()
def get_resume_service() -> ResumeTrustService:
    return ResumeTrustService.from_config(get_config())


def get_uow() -> Callable[[], ContextManager]:
    """
    FastAPI dependency returning the unit-of-work factory.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(uow=Depends(get_uow)):
            with uow() as repo:
                ...
    """
    from database.uow import trust_uow
    return trust_uow
