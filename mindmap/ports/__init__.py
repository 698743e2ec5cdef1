"""Abstract ports the services depend on."""
