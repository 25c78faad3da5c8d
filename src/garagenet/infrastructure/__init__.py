"""Infrastructure layer: managed data service, identity, client selection.

This layer depends on stdlib and third-party libs (httpx).
It must never import from domain, services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
