"""Application layer: request building and response decoding services."""
