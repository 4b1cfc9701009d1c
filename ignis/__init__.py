"""Game engine building blocks: key and mouse codes, events, input state, geometry, scene components, camera, texture and vertex layout descriptions, and a content browser model."""

__version__ = "0.1.0"