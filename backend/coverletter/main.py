import os
import logging

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .ai_services import AIService
from .deps import get_generation_service
from .resume import get_resume_text, load_resume_profile
from .sessions import SessionStore

load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Cover Letter Generator")

origins_env = os.getenv("CORS_ORIGINS")
origins = [o.strip() for o in (origins_env or "").split(",") if o.strip()] or ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One registry per process, handed to routes through deps.get_session_store
app.state.session_store = SessionStore()


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.detail})


@app.get("/api/health")
def health():
    return {"status": "ok", "message": "Cover Letter Generator is running"}


@app.get("/api/status")
def status(ai_service: AIService = Depends(get_generation_service)):
    configured = ai_service.is_configured
    return {
        "success": True,
        "apiConfigured": configured,
        "message": "Ready to generate" if configured else "API key not configured on server",
    }


@app.get("/api/resume")
def resume():
    return {
        "success": True,
        "data": load_resume_profile().model_dump(),
        "text": get_resume_text(),
    }


from .api.routes_scrape import router as scrape_router
from .api.routes_generate import router as generate_router
app.include_router(scrape_router)
app.include_router(generate_router)

# Static frontend is optional; mounted last so /api routes take precedence
public_dir = os.getenv("PUBLIC_DIR", "./public")
if os.path.isdir(public_dir):
    app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")
else:
    logger.info(f"No frontend at {public_dir}; serving API only")
