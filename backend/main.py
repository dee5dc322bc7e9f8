"""
Digital Build – FastAPI Backend

Main entry point. Sets up logging, CORS, error handlers and all routes.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import APP_VERSION, CORS_ORIGINS, LOG_LEVEL
from errors import DigitalBuildError

# Import route modules
from routes.design import router as design_router
from routes.estimate import router as estimate_router
from routes.chat import router as chat_router
from routes.matching import router as matching_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Digital Build",
    description="AI-assisted home construction planning: designs, cost estimates, "
                "3D previews and contractor matching",
    version=APP_VERSION,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DigitalBuildError)
async def digital_build_error_handler(request: Request, exc: DigitalBuildError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %r %s", request.method, request.url.path, exc, exc.details)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid value for {field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


# Include routers
app.include_router(design_router)
app.include_router(estimate_router)
app.include_router(chat_router)
app.include_router(matching_router)


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "version": APP_VERSION}


if __name__ == "__main__":
    import uvicorn
    from config import HOST, PORT
    uvicorn.run("main:app", host=HOST, port=PORT, reload=True)
