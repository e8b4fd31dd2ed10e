"""Configuration package for the bridge & torch engine.

``defaults`` holds the tunable constants; ``model_config`` holds the
dataclass handed to ``BridgeModel`` at construction.
"""
