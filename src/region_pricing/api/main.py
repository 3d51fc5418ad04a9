from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config.settings import get_settings
from ..utils.logger import setup_logging
from .pricing_api import router as pricing_router

setup_logging(get_settings().log_level)

app = FastAPI(
    title="Region Pricing API",
    description="Price lists by product and home region, for cases and customer batches",
    version="1.0.0"
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pricing_router)


@app.get("/")
async def root():
    return {"status": "online", "message": "Region Pricing API Active"}
