"""Dependency injection: hands the app's store and services to the routes."""

from fastapi import Request

from tailor_dashboard.core.config import Settings
from tailor_dashboard.db.store import CustomerStore
from tailor_dashboard.services.mutation import MutationService
from tailor_dashboard.services.query import QueryService


def get_store(request: Request) -> CustomerStore:
    """The store built by ``create_app`` for this application instance."""
    return request.app.state.store


def get_query_service(request: Request) -> QueryService:
    return QueryService(get_store(request))


def get_mutation_service(request: Request) -> MutationService:
    return MutationService(get_store(request))


def get_settings(request: Request) -> Settings:
    """The settings ``create_app`` was built with."""
    return request.app.state.settings
