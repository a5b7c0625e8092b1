"""
Core mathematical primitives, domain value objects, and invariants.

This package contains the real-valued transcendental layer and the
configuration it runs under. It is independent of the complex algebra.
"""
