"""Configuration, logging, database and error primitives shared by all layers."""
