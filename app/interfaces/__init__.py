"""
Interfaces layer package.

HTTP surface of the API: routers for cats and system endpoints,
the Pydantic request/response contracts, and the dependency
functions that hand each request the application's CatService.
"""
