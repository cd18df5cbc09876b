"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Persistence and cross‑cutting infrastructure live in
``core``, request/response models in ``schemas``, business rules in
``services`` and HTTP routes in ``api/v1/endpoints``.

Importing the package does not build an application; call
``blog_service_api.app.main.create_app`` or import
``blog_service_api.app.main:app`` for an ASGI server.
"""
