"""
Algorithm layer: the MOEA/D engine under `wscmoead.engine.algorithm.moead`
and its building blocks under `wscmoead.engine.algorithm.components`.
"""
