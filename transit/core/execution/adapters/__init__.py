"""
Per-context chain adapters.

Modules here are imported on demand by ``AdapterRegistry``; nothing is
re-exported so that importing the package does not load any adapter.
"""
