"""
Engine layer: reachability analysis, the MOEA/D evolutionary engine,
configuration and component registries.
"""
