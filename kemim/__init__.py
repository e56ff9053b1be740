"""Point-wise kinetics, flow stress and heat source models for energetic materials."""

__version__ = "0.1.0"
__all__ = [
    "kinetics",
    "arrhenius",
    "yield_stress",
    "misternet_heat",
    "shock_table",
]