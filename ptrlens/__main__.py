"""
PtrLens - Concurrent reverse DNS resolution

Entry point for running as a module:
    python -m ptrlens <files>
"""

from .cli import main

if __name__ == '__main__':
    main()
