# backend/modules/email_templates/__init__.py

"""
Feedback Email Templates Module

Stores the email templates used to ask customers for feedback and renders
previews of them with the current brand settings.

Key Components:
- Models: EmailTemplate with active/draft status
- Services: template CRUD and Jinja2 preview rendering
- Routers: /api/templates endpoints
"""

__version__ = "1.0.0"
