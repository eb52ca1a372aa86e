"""JSON web API for py-seek.

This package provides a Flask application that exposes the scheduling
engine over HTTP for a browser front end.  It is an **optional** extra
— install with::

    pip install py-seek[web]

The ``create_app`` factory in ``app.py`` serves:

- ``GET /api/algorithms`` — policy descriptions.
- ``POST /api/schedule`` — run one policy.
- ``POST /api/compare`` — run all policies side by side.
- ``POST /api/random`` — random request workload.
"""
