# backend/modules/email_templates/tests/__init__.py
