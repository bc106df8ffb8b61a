"""DevOps API provider package.

To use the client library:
    from app.core.devops import DevOpsClient, EngineerService

To get a fully configured handle (endpoint from argument or DEVOPS_ENDPOINT):
    from app.core.provider import configure_provider

To drive create/read/update/delete/import lifecycles:
    from app.core.reconciler import resource_handlers
"""
