from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import get_settings
from core.exceptions import register_exception_handlers
from app.startup import (
    configure_startup_logging,
    initialize_database,
    run_startup_checks,
)

# ========== Feedback ==========
from modules.feedback.routers.feedback_router import router as feedback_router
from modules.sentiment.routers.sentiment_router import router as sentiment_router

# ========== Campaigns ==========
from modules.email_templates.routers.template_router import router as template_router
from modules.forms.routers.form_router import router as form_router
from modules.branding.routers.brand_router import router as brand_router

# ========== Dashboard ==========
from modules.dashboard.routers.stats_router import router as stats_router

settings = get_settings()

app = FastAPI(
    title="Customer Feedback Dashboard API",
    description="""
    Backend for the customer feedback dashboard.

    ## Features

    * **Feedback** - Collect customer feedback, scored for sentiment on arrival
    * **Sentiment Analysis** - Lexicon based 0-100 sentiment scoring
    * **Email Templates** - Feedback request emails with brand-aware previews
    * **Feedback Forms** - Rating, choice and open-ended questionnaires
    * **Brand Settings** - Business name, colors and email footer
    * **Dashboard Stats** - Response volume and sentiment distribution
    """,
    version="1.0.0",
)

# Register exception handlers for consistent error responses
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(feedback_router)
app.include_router(sentiment_router)
app.include_router(template_router)
app.include_router(form_router)
app.include_router(brand_router)
app.include_router(stats_router)


@app.on_event("startup")
async def startup_event():
    """Initialize services on application startup"""
    configure_startup_logging()
    initialize_database()
    run_startup_checks()


@app.get("/")
def read_root():
    return {"message": "Feedback dashboard backend is running"}


@app.get("/health")
def health_check():
    return {"status": "healthy", "environment": settings.environment}
