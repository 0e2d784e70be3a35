"""
Boutique Storefront - Main FastAPI Application

Single entry point for the cart API consumed by the storefront pages.
"""
import sys
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Project root on sys.path for serverless deployments
_base_path = Path(__file__).parent.parent
if str(_base_path) not in sys.path:
    sys.path.insert(0, str(_base_path))

from boutique import __version__
from boutique.routers import router as api_router

# ==================== FASTAPI APP ====================

app = FastAPI(
    title="Boutique Storefront",
    description="Shopping cart API for the storefront pages",
    version=__version__,
)

# Static storefront pages are served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "boutique"}
