"""Browser-facing JSON API for py-disksched.

This package provides a Flask application that runs the six disk
scheduling policies over a request batch posted as JSON.  It is an
**optional** extra — install with::

    pip install py-disksched[web]

The ``create_app`` factory in ``app.py`` serves two endpoints:

- ``GET /api/policies`` — list the policies and the disk size.
- ``POST /api/schedule`` — run every policy and return the results.
"""
