"""Error taxonomy for the simulation engine."""


class LitsimError(ValueError):
    """Base class for input the engine refuses to simulate."""


class InvalidArgument(LitsimError):
    """Out-of-range scalar input (story length, trial count, loot weights)."""


class InvalidSettings(LitsimError):
    """Progression settings that would make the level-up loop unsound."""
