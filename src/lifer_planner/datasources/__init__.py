"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, auth, rate limiting
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``ebird/`` for an example.

2. Write fetch functions that return models from ``schemas.py``::

       from lifer_planner.services.http import get_json

       def fetch_something(lat, lon) -> list[Hotspot]:
           raw = get_json(API_URL, params={...})
           return [Hotspot.model_validate(r) for r in raw]

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the pipeline (see ``flows/recommend.py``) with a ``@task``.

5. Add tests in ``tests/test_{name}.py``.
"""
