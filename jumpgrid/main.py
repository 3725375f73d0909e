"""FastAPI entry point for the jump-grid decision service."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

app = FastAPI(
    title="Jump Grid Solver API",
    version="0.1.0",
    description="Per-turn move selection for the jump-grid puzzle",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Import and include routers
from jumpgrid.api.routes_board import router as board_router
from jumpgrid.api.routes_solver import router as solver_router

app.include_router(board_router, prefix="/api/boards", tags=["boards"])
app.include_router(solver_router, prefix="/api", tags=["solver"])


@app.get("/api/health")
async def health():
    return {"status": "ok"}
