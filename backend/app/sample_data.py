# backend/app/sample_data.py

"""
Sample dashboard content loaded into an empty database.

Used by scripts/seed_sample_data.py and by the SEED_SAMPLE_DATA startup flag.
"""

from datetime import datetime
from sqlalchemy.orm import Session
import logging

from core.time_utils import utcnow
from modules.branding.models.brand_models import BrandSettings
from modules.email_templates.models.template_models import EmailTemplate, TemplateStatus
from modules.feedback.models.feedback_models import Feedback
from modules.forms.models.form_models import FeedbackForm
from modules.sentiment.models.sentiment_models import Sentiment

logger = logging.getLogger(__name__)


SAMPLE_FEEDBACK = [
    {
        "customer": "Sarah Johnson",
        "sentiment": Sentiment.POSITIVE,
        "sentiment_score": 85,
        "message": "Love the service! Quick response time and very professional.",
        "date": datetime(2023, 8, 15),
        "tags": ["service", "response time"],
    },
    {
        "customer": "Mike Reynolds",
        "sentiment": Sentiment.NEGATIVE,
        "sentiment_score": 25,
        "message": "Product arrived damaged. Customer service was helpful though.",
        "date": datetime(2023, 8, 14),
        "tags": ["product", "delivery", "customer service"],
    },
    {
        "customer": "Emma Lewis",
        "sentiment": Sentiment.POSITIVE,
        "sentiment_score": 90,
        "message": "The new feature is exactly what I needed. So intuitive!",
        "date": datetime(2023, 8, 13),
        "tags": ["features", "usability"],
    },
    {
        "customer": "Alex Thompson",
        "sentiment": Sentiment.NEUTRAL,
        "sentiment_score": 50,
        "message": "Product is good but shipping took longer than expected.",
        "date": datetime(2023, 8, 12),
        "tags": ["product", "shipping"],
    },
    {
        "customer": "David Clark",
        "sentiment": Sentiment.POSITIVE,
        "sentiment_score": 80,
        "message": "Great customer support team. They solved my issue in minutes!",
        "date": datetime(2023, 8, 11),
        "tags": ["support", "service"],
    },
]

SAMPLE_TEMPLATES = [
    {
        "name": "Post-Purchase Follow-up",
        "subject": "How was your recent purchase?",
        "content": (
            "Hi [Customer Name],\n\n"
            "Thank you for your recent purchase with [Your Business].\n\n"
            "We'd love to hear your feedback to help us improve our service...\n\n"
            "[Share Feedback Button]"
        ),
        "status": TemplateStatus.ACTIVE,
    },
    {
        "name": "Service Satisfaction",
        "subject": "We value your feedback on our service",
        "content": (
            "Hi [Customer Name],\n\n"
            "Thank you for using our services recently.\n\n"
            "We'd appreciate your feedback on your experience...\n\n"
            "[Share Feedback Button]"
        ),
        "status": TemplateStatus.ACTIVE,
    },
    {
        "name": "Website Experience",
        "subject": "Tell us about your website experience",
        "content": (
            "Hi [Customer Name],\n\n"
            "We noticed you recently visited our website.\n\n"
            "We'd love to hear about your experience...\n\n"
            "[Share Feedback Button]"
        ),
        "status": TemplateStatus.DRAFT,
    },
]

SAMPLE_BRAND_SETTINGS = {
    "business_name": "Acme Inc.",
    "contact_email": "feedback@acmeinc.com",
    "website_url": "https://acmeinc.com",
    "primary_color": "#3B82F6",
    "secondary_color": "#10B981",
    "logo": "",
    "font_family": "Inter",
    "button_style": "rounded",
    "email_footer": (
        "© 2023 Acme Inc. All rights reserved. You're receiving this email because "
        "you're a customer of Acme Inc. If you wish to unsubscribe, click here."
    ),
}

SAMPLE_FORM = {
    "name": "Customer Satisfaction Form",
    "questions": [
        {
            "id": "q1",
            "type": "rating",
            "question": "Overall satisfaction",
            "options": None,
            "required": True,
        },
        {
            "id": "q2",
            "type": "multiple-choice",
            "question": "What did you like most about our service?",
            "options": ["Quality", "Speed", "Customer service", "Price", "Other"],
            "required": False,
        },
        {
            "id": "q3",
            "type": "open-ended",
            "question": "Do you have any suggestions for improvement?",
            "options": None,
            "required": False,
        },
        {
            "id": "q4",
            "type": "single-choice",
            "question": "Would you recommend us to others?",
            "options": ["Yes", "Maybe", "No"],
            "required": True,
        },
    ],
    "appearance": {
        "brand_color": "#3B82F6",
        "logo": None,
        "font_family": "Inter",
        "button_style": "rounded",
    },
}


def seed_sample_data(db: Session) -> bool:
    """
    Load the sample content unless feedback already exists

    Returns:
        True if data was inserted
    """
    if db.query(Feedback).first() is not None:
        logger.info("Feedback already present, skipping sample data")
        return False

    for feedback_data in SAMPLE_FEEDBACK:
        db.add(Feedback(**feedback_data))

    for template_data in SAMPLE_TEMPLATES:
        db.add(EmailTemplate(last_edited=utcnow(), **template_data))

    if db.query(BrandSettings).first() is None:
        db.add(BrandSettings(**SAMPLE_BRAND_SETTINGS))

    db.add(FeedbackForm(**SAMPLE_FORM))

    db.commit()
    logger.info(
        f"Seeded {len(SAMPLE_FEEDBACK)} feedback entries, "
        f"{len(SAMPLE_TEMPLATES)} templates, brand settings and 1 form"
    )
    return True
