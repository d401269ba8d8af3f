"""
Top-level PayArk client.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import PayArkConfig
from .resources import Checkout, Payments, Projects

__all__ = ["PayArk"]


class PayArk:
    """
    Entry point bundling the checkout, payments and projects resources.

    All resources share ``config`` and one ``requests.Session``. Constructing
    the client performs no network activity.
    """

    def __init__(
        self,
        config: PayArkConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

        self.checkout = Checkout(config, session=self.session)
        self.payments = Payments(config, session=self.session)
        self.projects = Projects(config, session=self.session)
        logging.debug(
            "PayArk client ready (base_url=%s, sandbox=%s)",
            config.base_url,
            config.sandbox,
        )

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "PayArk":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
