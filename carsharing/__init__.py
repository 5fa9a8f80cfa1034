"""Car-sharing manager: vehicle registry, priority booking queue, weekly calendar and terminal menu."""

__version__ = "0.1.0"
__all__ = ["bookings", "cli", "schedule", "vehicles"]