# backend/modules/branding/tests/__init__.py
