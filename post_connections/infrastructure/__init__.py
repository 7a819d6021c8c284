"""Infrastructure layer: aiohttp transport, wire encoders, state machines."""
