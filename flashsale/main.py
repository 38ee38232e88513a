import os
import logging
import uvicorn
from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from flashsale.api import flash_sale, product, status
from flashsale.seed import AVAILABLE_PRODUCTS
from flashsale.services.board import board

API_KEY = os.getenv("FLASHSALE_API_KEY", "").strip()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("FLASHSALE_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
QUIET_ACCESS_LOG = os.getenv("FLASHSALE_QUIET_ACCESS_LOG", "1").strip().lower() in {"1", "true", "yes", "on"}
SERVER_HOST = os.getenv("FLASHSALE_SERVER_HOST", "127.0.0.1").strip()
SERVER_PORT = int(os.getenv("FLASHSALE_SERVER_PORT", "8000"))
PUBLIC_PREFIXES = ("/docs", "/openapi.json", "/redoc")

if QUIET_ACCESS_LOG:
    # Keep warning/error lines, suppress normal access noise (200/201 etc).
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

app = FastAPI(title="Flash Sale Catalog")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {
        "ok": True,
        "service": "flash-sale-catalog",
        "time_utc": datetime.now(timezone.utc).isoformat(),
        "docs": "/docs",
    }


@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "products": len(AVAILABLE_PRODUCTS),
        "flash_sales": len(board.all()),
    }


@app.middleware("http")
async def api_key_middleware(request: Request, call_next):
    if not API_KEY:
        return await call_next(request)
    if request.url.path.startswith(PUBLIC_PREFIXES):
        return await call_next(request)
    if request.headers.get("X-API-Key") != API_KEY:
        return JSONResponse({"detail": "Unauthorized"}, status_code=401)
    return await call_next(request)


app.include_router(product.router)
app.include_router(status.router)
app.include_router(flash_sale.router)


def run() -> None:
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    run()
