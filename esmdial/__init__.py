"""Read dialogue topic names from game plugin files and pair them across two languages."""

__version__ = "0.1.0"