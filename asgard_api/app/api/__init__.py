"""
API package containing versioned routes.

Resource routers live under ``v1``.  ``deps`` resolves the services
stored on the application state, ``errors`` turns repository errors
into HTTP responses and ``health`` hosts the unversioned liveness
probe.
"""
