"""Default settings for the Flask app.

Any key can be overridden through a ``GROWTH_PROJECTION_`` prefixed
environment variable, e.g. ``GROWTH_PROJECTION_LOG_LEVEL=DEBUG``. Values are
parsed as JSON when possible, so lists work too:
``GROWTH_PROJECTION_CORS_ORIGINS='["https://example.org"]'``.
"""

ENV_PREFIX = "GROWTH_PROJECTION"


class Config:
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
    LOG_LEVEL = "INFO"
    CSV_FILENAME = "projection.csv"
