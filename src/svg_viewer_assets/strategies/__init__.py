"""Bundled strategies for the viewer assets pipeline.

Each module in this package registers one Strategy with the
StrategyRegistry when imported.
"""

# Strategy modules are imported dynamically by StrategyRegistry.discover_strategies()
