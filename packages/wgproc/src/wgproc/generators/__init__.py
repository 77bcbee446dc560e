"""Generators discovered by `wgproc.discovery.register_from_package`.

Every module here exposing a module-level ``GEN`` is registered.
"""
