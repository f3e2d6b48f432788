"""
Engine layer: the Monkey Search implementation.

The algorithm lives in `monkeysearch.engine.algorithm.msa`; agents and
populations are shared building blocks under
`monkeysearch.engine.algorithm.components`.
"""
