"""Services Layer — exam resource handling and the authentication gate.

Invariants:
    - Services depend on core/repository_protocols, never on concrete stores
    - Validation always completes before the first storage call
"""
