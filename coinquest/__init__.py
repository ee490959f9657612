"""Entity-component scene model, transforms, meshes, materials and asset registries for a coin-collecting runner game."""

__version__ = "1.0.0"