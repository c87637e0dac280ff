"""
Application Layer

Wires the logging backend into a registry and interceptor, and wraps
callables so every call passes through the interceptor's hooks.
"""
