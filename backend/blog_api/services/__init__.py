"""Service layer.

Use cases live in one subpackage per aggregate and are framework-agnostic:

- :mod:`blog_api.services.auth` - login, access verification, refresh-token
  rotation, logout and operator revocation (:class:`AuthService`).
- :mod:`blog_api.services.accounts` - signup and profile management.
- :mod:`blog_api.services.posts` - post CRUD with comment cascade.
- :mod:`blog_api.services.comments` - comment CRUD.

Shared primitives (:class:`BaseService`, :class:`ServiceContext`, errors and
ports) live in :mod:`blog_api.services._shared`. Import from the subpackages
directly; this module stays import-free so the infra adapters can depend on
the ports without pulling in the models.
"""
