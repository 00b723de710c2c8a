"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, error types
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Only ``weather/`` (Open-Meteo forecast) exists. Fetch functions go through
the shared session in ``services/http.py`` and return validated models from
``schemas.py``; they raise ``ForecastError`` subclasses, never bare
``requests`` exceptions.
"""
