#!/usr/bin/env python3
"""
Start script - port comes from PORT (or APP_PORT), validated before uvicorn binds
"""

if __name__ == "__main__":
    from core.config import settings, validate_configuration

    validate_configuration()

    # Import and run uvicorn programmatically
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower()
    )
