"""Application layer: commands, queries, handlers and application services.

Application code depends on domain protocols only; concrete adapters are
injected by the container.
"""
