"""UCENPulse API - FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routes import activities, metrics, charts, summary, data, notifications

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="UCENPulse API",
    description="Personal fitness tracker: activities, health metrics and trends",
    version="1.0.0",
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# Include routers
app.include_router(activities.router)
app.include_router(metrics.router)
app.include_router(charts.router)
app.include_router(summary.router)
app.include_router(data.router)
app.include_router(notifications.router)


@app.get("/health")
async def health_check():
    """Health check endpoint for the API."""
    return {"status": "healthy", "service": "ucenpulse-api"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.pulse_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
