"""Proxy: a stand-in that controls access to the real object."""

from __future__ import annotations

from abc import ABC, abstractmethod

BANNED_HOSTS = frozenset({"tiktok.com"})


class Internet(ABC):
    @abstractmethod
    def request(self, host: str) -> str:
        """Request ``host`` and return the outcome."""


class RealInternet(Internet):
    def request(self, host: str) -> str:
        return "Connecting to " + host


class Proxy(Internet):
    """Refuses banned hosts and forwards every other request to the real internet."""

    def __init__(self, real: Internet | None = None) -> None:
        self.real = real if real is not None else RealInternet()

    def request(self, host: str) -> str:
        if host in BANNED_HOSTS:
            return "This site is banned!"
        return self.real.request(host)