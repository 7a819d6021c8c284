"""Domain layer for the POST connection manager.

This layer contains:
- Interfaces: Transport, observer and image encoder contracts
- Value Objects: Request descriptors and error/outcome classifications
- Entities: Pending processes awaiting delivery
- Helpers: Parameter map merge/encode/decode

The domain layer has ZERO dependencies on external libraries (except Python stdlib).
"""
