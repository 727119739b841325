# wavebatch/demand/__init__.py
from .orders import Order
from .instance import Instance
from .rng import RNG
from .generator import InstanceSpec, make_instance

__all__ = [
    "Order",
    "Instance",
    "RNG",
    "InstanceSpec",
    "make_instance",
]
