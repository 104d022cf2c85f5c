from fastapi import FastAPI, Depends, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from sqlalchemy import text
from typing import List
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from newsletter_writer import __version__
from newsletter_writer.database import get_db, engine, Base
from newsletter_writer import models  # noqa: F401  registers tables on Base.metadata
from newsletter_writer.config import get_settings, get_cors_origins, check_production_settings
from newsletter_writer.errors import ActionError, action_error_handler
from newsletter_writer.auth import action_validation_error_handler
from newsletter_writer.routers import auth, campaigns, issues, blocks


logger = logging.getLogger(__name__)


settings_for_cors = get_settings()
check_production_settings(settings_for_cors)
cors_allow_origins: List[str] = get_cors_origins(settings_for_cors)

if cors_allow_origins:
    logger.info("Allowing CORS origins: %s", cors_allow_origins)


# Create tables
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Newsletter Writer API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"https?://localhost(:\d+)?$",
    allow_origins=cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ActionError, action_error_handler)
app.add_exception_handler(RequestValidationError, action_validation_error_handler)


@app.get("/api")
def api_info():
    """API information endpoint"""
    return {"message": "Newsletter Writer API", "version": __version__}


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Check if API and database are working"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        logger.exception("Health check failed")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")


app.include_router(auth.router)
app.include_router(campaigns.router)
app.include_router(issues.router)
app.include_router(blocks.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
