"""Service layer for sro_correios.

Code validation, carrier authentication, response normalization and the
batched tracking client.
"""
