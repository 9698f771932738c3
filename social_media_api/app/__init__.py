"""
Application package initializer.

The project is organised into layers: ``core`` holds configuration,
logging and database plumbing, ``repositories`` wrap the two tables,
``services`` hold the validation rules and ``api`` maps HTTP requests
onto the services.  The ASGI application itself lives in ``main`` and
is built by ``create_app``; importing this package does not create it.
"""
