from tailor_dashboard.services.mutation import MutationService
from tailor_dashboard.services.query import CustomerQuery, QueryService

__all__ = ["CustomerQuery", "MutationService", "QueryService"]
