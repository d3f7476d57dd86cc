"""azsm - Azure Service Management (classic) projection layer and CLI

Philosophy:
- Explicit mapping rules, built once and frozen
- Every emitted object carries the operation that produced it
- Absent data stays absent (None), malformed data fails loudly

azsm maps legacy and current Service Management models onto each other,
resolves which extensions are active on which deployment roles and projects
responses into user-facing contexts.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
