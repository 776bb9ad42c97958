"""In‑memory users CRUD service; the application lives in ``users_api.app``."""
