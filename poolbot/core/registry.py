"""
Trusted host registry.

Single source of truth for where the bot may send users:
- the pool-creation endpoint for every supported cluster
- the flat allow-list of hostnames any outbound link must match

The registry is built once at import time (TRUSTED_HOSTS) and is read-only.
There is no API to add hosts at runtime; changing the list means changing
this file.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from urllib.parse import urlsplit

from poolbot.core.exceptions import UnsupportedNetworkError
from poolbot.core.models import Network

RAYDIUM_HOST = "raydium.io"
RAYDIUM_POOL_CREATION_URL = "https://raydium.io/liquidity/create-pool/"


@dataclass(frozen=True)
class PoolEndpoint:
    """
    Pool-creation page for one cluster.

    Attributes:
        base_url: Absolute https URL of the page (no query, no fragment)
        cluster: Value of the `cluster` query parameter, None for mainnet
    """

    base_url: str
    cluster: str | None = None

    @property
    def host(self) -> str:
        return urlsplit(self.base_url).hostname or ""


@dataclass(frozen=True)
class TrustedHostRegistry:
    """
    Immutable mapping of networks to endpoints plus the host allow-list.

    Host matching policy: case-insensitive exact match. No suffix or
    subdomain matching; every accepted host is listed explicitly.
    """

    endpoints: Mapping[Network, PoolEndpoint]
    allowed_hosts: frozenset[str]

    def __post_init__(self) -> None:
        hosts = frozenset(host.lower() for host in self.allowed_hosts)
        endpoints = MappingProxyType(dict(self.endpoints))

        for network, endpoint in endpoints.items():
            parts = urlsplit(endpoint.base_url)
            if parts.scheme != "https":
                raise ValueError(f"Endpoint for {network.value} must use https")
            if parts.query or parts.fragment:
                raise ValueError(f"Endpoint for {network.value} must not carry a query")
            if endpoint.host not in hosts:
                raise ValueError(
                    f"Endpoint host {endpoint.host!r} for {network.value} "
                    f"is missing from the allow-list"
                )

        # Frozen dataclass: bypass __setattr__ to store the read-only copies
        object.__setattr__(self, "allowed_hosts", hosts)
        object.__setattr__(self, "endpoints", endpoints)

    def endpoint_for(self, network: Network) -> PoolEndpoint:
        """
        Get the pool-creation endpoint for a cluster.

        Raises:
            UnsupportedNetworkError: If the cluster has no endpoint
        """
        try:
            return self.endpoints[network]
        except KeyError:
            raise UnsupportedNetworkError(
                technical_message=f"No trusted endpoint for network {network!r}"
            ) from None

    def is_allowed_host(self, host: str | None) -> bool:
        """Check a hostname against the allow-list (case-insensitive, exact)."""
        if not host:
            return False
        return host.lower() in self.allowed_hosts


TRUSTED_HOSTS = TrustedHostRegistry(
    endpoints={
        Network.MAINNET: PoolEndpoint(base_url=RAYDIUM_POOL_CREATION_URL),
        Network.DEVNET: PoolEndpoint(
            base_url=RAYDIUM_POOL_CREATION_URL,
            cluster=Network.DEVNET.value,
        ),
    },
    allowed_hosts=frozenset({RAYDIUM_HOST, "www.raydium.io"}),
)
