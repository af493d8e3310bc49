"""
Transport adapter for the Quai JSON-RPC dialect.

A Quai node serves the usual Ethereum methods except for two that it
exposes under its own namespace. This module rewrites those method names on
the way out, either around a bare request function or as web3.py middleware.
"""

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from web3.middleware import Web3Middleware
from web3.types import RPCEndpoint

logger = logging.getLogger(__name__)

# Standard method name -> Quai method name
METHOD_RENAMES: Mapping[str, str] = MappingProxyType({
    "eth_chainId": "quai_chainId",
    "eth_sendTransaction": "quai_sendTransaction",
})

RequestFn = Callable[[str, Any], Any]


def rename_method(method: str) -> str:
    """Return the Quai name for ``method``, or ``method`` itself if unchanged."""
    renamed = METHOD_RENAMES.get(method, method)
    if renamed != method:
        logger.debug(f"Renaming RPC method {method} -> {renamed}")
    return renamed


class QuaiTransport:
    """Wraps a provider's request function and renames Quai-specific methods.

    The wrapped call's result and errors are passed back untouched.
    """

    def __init__(self, request: RequestFn) -> None:
        """
        Initialize the transport.

        Args:
            request: Underlying request function taking ``(method, params)``
        """
        self._request: RequestFn = request

    def request(self, method: str, params: Any = None) -> Any:
        """
        Forward a request, renaming the method where Quai diverges.

        Args:
            method: Standard JSON-RPC method name
            params: Parameter list for the call

        Returns:
            Whatever the underlying request function returns
        """
        return self._request(rename_method(method), params)

    __call__ = request


class QuaiMethodMiddleware(Web3Middleware):
    """web3.py middleware applying the Quai method renames.

    Install innermost:
    ``w3.middleware_onion.inject(QuaiMethodMiddleware, name="quai_methods", layer=0)``.
    Response formatting in web3.py is keyed on the standard method name, so
    ``w3.eth.chain_id`` still returns an int. web3.py's default middleware
    read standard Ethereum blocks around ``eth_sendTransaction``; build the
    ``Web3`` with ``middleware=[]`` when submitting through ``w3.eth``.
    """

    def request_processor(self, method: RPCEndpoint, params: Any) -> Any:
        return RPCEndpoint(rename_method(method)), params

    async def async_request_processor(self, method: RPCEndpoint, params: Any) -> Any:
        return RPCEndpoint(rename_method(method)), params
