"""
diff2html Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from routers import render, config
from services.config_manager import ConfigManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting diff2html backend...")
    config_manager = ConfigManager.get_instance()
    print(f"[Backend] ConfigManager initialized ({config_manager.config_file})")

    yield
    print("[Backend] Shutting down diff2html backend...")


app = FastAPI(
    title="diff2html Backend",
    description="Render unified diffs as standalone HTML pages or JSON",
    version="1.0.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(render.router, prefix="/api/render", tags=["render"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "diff2html-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "127.0.0.1"), port=server.get("port", 8000))
