from __future__ import annotations

from typing import Protocol

from .model import OutgoingEmail


class Mailer(Protocol):
    def send(self, email: OutgoingEmail) -> None:
        """Hand the message to the transport; raise DeliveryError on failure."""

        raise NotImplementedError
