"""StaffHub - users, departments and their credentials.

Packages:
- staffhub: user/department domain, Result/Option types, persistence, HTTP API
- staffhub_auth: login, credential updates and password recovery
- staffhub_config: settings
"""
