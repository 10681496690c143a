from fastapi import APIRouter

from mullerroot.api.v1.endpoints import health, solver

api_router = APIRouter()

# ==============================================================================
# 1. Core Engine (Muller 솔버)
# ==============================================================================
api_router.include_router(solver.router, prefix="/solver", tags=["Solver"])

# ==============================================================================
# 2. System (헬스 체크)
# ==============================================================================
api_router.include_router(health.router, tags=["Health"])
