"""Salon System package.

This package is organized by feature modules (users, clients, items, orders)
with a thin Flask JSON controller layer and service/repository layers.
"""
