"""
Exceptions raised by PtrLens
"""


class PtrLensError(Exception):
    """Base class for every error raised by the package"""


class InvalidAddress(PtrLensError, ValueError):
    """A literal could not be parsed as an IPv4 or IPv6 address"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid IP address: {value!r}")


class InvalidJobCount(PtrLensError, ValueError):
    """Requested job count is below 1"""

    def __init__(self, njobs: int):
        self.njobs = njobs
        super().__init__(f"Job count must be at least 1, got {njobs}")


class TooManyJobs(PtrLensError):
    """Requested parallelism exceeds the number of logical cores"""

    def __init__(self, njobs: int, max_threads: int):
        self.njobs = njobs
        self.max_threads = max_threads
        super().__init__(
            f"Too many jobs: {njobs} requested, at most {max_threads} allowed"
        )


class PipelineBroken(PtrLensError):
    """The parallel pipeline lost a record or a worker failed"""


class InvalidInput(PtrLensError):
    """An address file could not be read in the requested format"""
