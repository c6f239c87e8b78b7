"""Instance domain exports."""

from .default_instantiator import instantiate
from .instance_accessors import create, get_data, get_property, set_property
from .instance_models import Instance

__all__ = [
    "Instance",
    "create",
    "get_data",
    "get_property",
    "instantiate",
    "set_property",
]
