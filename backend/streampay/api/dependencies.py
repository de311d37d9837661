"""Dependencies — explicit wiring of shared services into route handlers.

Invariants:
    - The ClaimableAmountService instance is created once in the app lifespan
      and read from app.state; routes never construct their own

Design Decisions:
    - app.state over a module-level singleton: one instance per app, swapped in
      tests through app.dependency_overrides
"""

from fastapi import Request

from streampay.services.claimable_service import ClaimableAmountService


def get_claimable_service(request: Request) -> ClaimableAmountService:
    return request.app.state.claimable_service
