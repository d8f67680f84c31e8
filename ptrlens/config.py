"""
Runtime configuration for PtrLens
"""

import os


# Placeholder returned by the fake and latent resolvers
FAKE_NAME = "some.host.invalid"

# Name reported when an address has no PTR record
NO_PTR_NAME = "some.host.invalid"

# Artificial delay of the latent resolver, in seconds
LATENCY = 0.001

# Per-query timeout for the dnspython resolver, in seconds
DNS_TIMEOUT = 2.0

DEFAULT_RESOLVER = "live"


def cpu_count() -> int:
    """Number of logical cores, never less than 1"""
    return os.cpu_count() or 1


class Settings:
    """
    Settings read from the environment.

    Every value has a default so the package works with an empty
    environment; the PTRLENS_* variables override them.
    """

    def __init__(self):
        self.max_threads: int = int(os.getenv("PTRLENS_MAX_THREADS", str(cpu_count())))
        self.jobs: int = int(os.getenv("PTRLENS_JOBS", str(self.max_threads)))
        self.resolver: str = os.getenv("PTRLENS_RESOLVER", DEFAULT_RESOLVER).lower()
        self.timeout: float = float(os.getenv("PTRLENS_TIMEOUT", str(DNS_TIMEOUT)))
        self.latency: float = float(os.getenv("PTRLENS_LATENCY", str(LATENCY)))

    def __repr__(self) -> str:
        return (
            f"Settings(max_threads={self.max_threads}, jobs={self.jobs}, "
            f"resolver={self.resolver!r}, timeout={self.timeout}, latency={self.latency})"
        )


def get_settings() -> Settings:
    return Settings()
