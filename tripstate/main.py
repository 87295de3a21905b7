"""FastAPI application - stateless derivation service for the trip UIs."""

from fastapi import FastAPI

from tripstate.api.routes.derive import router as derive_router
from tripstate.api.routes.health import router as health_router
from tripstate.api.routes.overrides import router as overrides_router
from tripstate.utils.logging import configure_logging

configure_logging()

app = FastAPI(title="Trip State API", version="0.1.0")

# Register routes
app.include_router(health_router)
app.include_router(derive_router)
app.include_router(overrides_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Trip State API", "version": "0.1.0"}
