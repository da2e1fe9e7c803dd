"""
UIKB HTTP Server

FastAPI app hosting the code generation relay and model listing.
"""

from fastapi import FastAPI

from uikb import __version__
from uikb.configs.logging import get_logger
from uikb.http.relay import router as relay_router

logger = get_logger("http")

# Create FastAPI app
app = FastAPI(
    title="UIKB Server",
    description="Code generation grounded in the component knowledge base",
    version=__version__,
)

# Include routers
app.include_router(relay_router, prefix="/api", tags=["relay"])


@app.get("/health")
def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


def run_server(host: str = "0.0.0.0", port: int = 8080):
    """Run the FastAPI server."""
    import uvicorn
    logger.info(f"Starting HTTP server on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level="warning")
