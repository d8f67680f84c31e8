"""
Resolution engines for PtrLens
"""

from .channel import ThreadChannel, AsyncChannel, ChannelClosed
from .sequential import simple_solve
from .parallel import ThreadPipeline, AsyncPipeline, parallel_solve, parallel_solve_async
from .dispatch import BACKENDS, check_jobs, resolve, resolve_async

__all__ = [
    'ThreadChannel', 'AsyncChannel', 'ChannelClosed', 'simple_solve',
    'ThreadPipeline', 'AsyncPipeline', 'parallel_solve', 'parallel_solve_async',
    'BACKENDS', 'check_jobs', 'resolve', 'resolve_async',
]
