from __future__ import annotations


class DiffStatError(Exception):
    """Base class for every failure that aborts a git-diff-stat run."""


class RepositoryUnavailable(DiffStatError):
    pass


class HistoryReadError(DiffStatError):
    pass


class CommitResolutionError(DiffStatError):
    pass


class DiffComputationError(DiffStatError):
    pass


class OutputError(DiffStatError):
    pass


class ConfigError(DiffStatError):
    pass
