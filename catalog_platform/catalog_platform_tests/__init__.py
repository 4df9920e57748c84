"""
catalog_platform tests

Covers both services of the platform:

- auth service: registration, login, tokens, user administration, audit log
- product service: catalog CRUD, ownership checks, soft-delete, search
- shared error mapping and request timeout
"""
