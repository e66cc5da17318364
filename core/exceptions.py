"""
Exceptions raised by the Wayback client and the spam check engine.
"""


class WaybackError(Exception):
    """Base class for every Wayback related failure."""


class SnapshotListError(WaybackError):
    """The CDX snapshot listing could not be fetched or decoded."""


class SnapshotFetchError(WaybackError):
    """An archived snapshot could not be downloaded."""


class DomainAnalysisError(WaybackError):
    def __init__(self, domain: str, message: str):
        super().__init__(f"Domain analysis failed for {domain}: {message}")
        self.domain = domain
