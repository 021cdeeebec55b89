"""JSON document models and codec for the tracking collections."""

from .codec import decode_collection, encode_collection

__all__ = ["decode_collection", "encode_collection"]
