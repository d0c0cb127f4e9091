from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from blaide_api.config import get_settings
from blaide_api.database import close_database
from blaide_api.errors import BlaideError, ConfigurationError
from blaide_api.routes import admin, contact, send_email, site
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="Blaide API",
    description="Contact form, email relay and admin console API for the Blaide site",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(send_email.router)
app.include_router(contact.router)
app.include_router(site.router)
app.include_router(admin.router)


@app.exception_handler(BlaideError)
async def blaide_error_handler(request: Request, exc: BlaideError):
    if isinstance(exc, ConfigurationError):
        logger.error(f"Configuration error on {request.url.path}: {exc.message}")
    elif exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Lifecycle events
@app.on_event("startup")
async def startup():
    logger.info("Starting Blaide API")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Shutting down Blaide API")
    close_database()


@app.get("/", tags=["root"])
async def root():
    return {
        "message": "Welcome to Blaide API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health", tags=["health"])
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "blaide_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
