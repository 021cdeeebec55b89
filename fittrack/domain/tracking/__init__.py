"""Tracking domain: catalogs, logs, measurements, habits and the store owning them."""
