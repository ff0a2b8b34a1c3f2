"""
Top-level package for the Restaurant API.

Makes ``restaurant_api`` a package so that the application can be
imported with fully qualified names such as ``restaurant_api.app.main``.
"""
