"""Exam Tracker Application Package — courses and per-user exam records over REST.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
