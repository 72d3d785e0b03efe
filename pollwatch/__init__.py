"""
pollwatch - run a command when watched paths change.

Polls the filesystem for a configured set of paths, providing:
- Exact path and extended glob (brace alternation) path discovery
- Snapshots of path modification times and a single-change diff
- A poll/trigger loop that runs a shell command with the change
  substituted into it ($diff, $path, $mtime)

Polling keeps the watcher portable: it needs nothing from the platform
beyond stat() and directory listing.
"""

__version__ = "0.1.0"
