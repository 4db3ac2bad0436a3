"""Building blocks for an event and RSVP web application: message bundles and language tags."""

__version__ = "1.0.2"