"""Domain layer: entities, enums, events, validators and ports.

Pure business logic. Nothing in this package performs I/O or imports from
the application or infrastructure layers.
"""
