"""
Turnstile domain modules.

Each module exposes its functionality through an interface (Protocol)
and keeps its storage behind a repository:

- users: credential store and password hashing
- sessions: server-side sessions keyed by cookie token
- auth: signup and login
- admin: promote/demote role management
"""
