"""
Storage layer.

Repositories hide SQL from the service layer.  Services depend on the
abstract ``RestaurantStore`` so a different backend can be swapped in
without touching business logic or API handlers.
"""
