"""Core Logic Module

Module Structure:
    - devops/       : DevOps API client, entities, codec and per-kind services
    - provider.py   : Typed configured handle (client + services)
    - reconciler.py : Resource handlers and data sources for declarative engines

Usage Pattern:
    Submodules are imported explicitly:
        from app.core.devops import EngineerService, NotFoundError
        from app.core.provider import configure_provider
        from app.core.reconciler import resource_handlers, data_sources, drift
"""
