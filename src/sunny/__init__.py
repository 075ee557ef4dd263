"""
Thousand Sunny Ship Systems

A simulation of the tech on board the Thousand Sunny pirate ship: a DMS coordinate
model with simple north/south displacement, a location service wrapper, and the
ship's flavor-text systems behind the ``sunny`` command.
"""

__version__ = "0.1.0"
