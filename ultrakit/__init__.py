"""Fixed-width arithmetic, printf formatting, message queues, timers, buffer regions, sprites and game-state models."""

__version__ = "0.1.0"

__all__ = ["actor", "arith", "mesgqueue", "player", "printf", "region", "sprite", "timers"]