"""
Rule tables used by the domain and rules layers.

Plain constants only: no domain imports at module level so that every
layer can read them without import cycles.
"""
