# backend/modules/forms/tests/__init__.py
