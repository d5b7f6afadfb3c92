"""Population-based minimization: artificial bee colony, bat and cuckoo search."""

__version__ = "0.1.0"
__all__ = [
    "algorithm",
    "bat",
    "bee_colony",
    "config",
    "cuckoo",
    "individual",
    "population",
    "rng",
    "space",
    "utility",
]