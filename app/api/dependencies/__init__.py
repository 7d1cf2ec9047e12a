"""API-layer dependencies: request-scoped wiring (UoW, current learner)."""

from app.api.dependencies.current_user import get_current_user_id
from app.api.dependencies.unit_of_work import UnitOfWork, get_uow

__all__ = ["UnitOfWork", "get_current_user_id", "get_uow"]
