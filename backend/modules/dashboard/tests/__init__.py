# backend/modules/dashboard/tests/__init__.py
