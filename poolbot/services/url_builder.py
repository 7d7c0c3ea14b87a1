"""
Raydium pool-creation URL builder.

Turns a mint address into a link to Raydium's create-pool page.

Guarantees:
1. The address is re-validated here, whatever the caller did before
2. The address only ever lands in the query string, percent-encoded
3. The resulting host is exactly the registered endpoint host
"""

import logging
from urllib.parse import urlencode, urlsplit, urlunsplit

from poolbot.core.exceptions import BlockedNavigationError, InvalidAddressError
from poolbot.core.models import AddressStrictness, Network
from poolbot.core.registry import TRUSTED_HOSTS, TrustedHostRegistry
from poolbot.utils.validators import validate_mint_address

logger = logging.getLogger(__name__)

MINT_QUERY_PARAM = "inputMint"
CLUSTER_QUERY_PARAM = "cluster"

# Characters of a rejected candidate kept in technical messages
LOG_PREVIEW_LENGTH = 8


def build_pool_creation_url(
    address: str,
    network: Network = Network.DEVNET,
    *,
    strictness: AddressStrictness = AddressStrictness.STRUCTURAL,
    registry: TrustedHostRegistry = TRUSTED_HOSTS,
) -> str:
    """
    Build the Raydium create-pool URL for a token.

    Defaults to devnet so a user mistake costs test tokens, not real ones.

    Args:
        address: Token mint address (re-validated here)
        network: Cluster to create the pool on
        strictness: Validation strictness for the re-check
        registry: Trusted endpoints (the process-wide registry by default)

    Returns:
        Absolute https URL on the registered host for `network`

    Raises:
        InvalidAddressError: If the address fails validation
        UnsupportedNetworkError: If the registry has no endpoint for `network`
        BlockedNavigationError: If the produced URL escapes the endpoint host
    """
    validation = validate_mint_address(address, strictness)
    if not validation.is_valid:
        raise InvalidAddressError(
            message=validation.error,
            technical_message=(
                f"Refusing to build URL for address "
                f"{address[:LOG_PREVIEW_LENGTH]!r}: {validation.error}"
            ),
        )

    endpoint = registry.endpoint_for(network)
    # A plain "devnet" string finds its str enum key; normalize it for logging
    network = Network(network)

    params = {MINT_QUERY_PARAM: address}
    if endpoint.cluster:
        params[CLUSTER_QUERY_PARAM] = endpoint.cluster

    base = urlsplit(endpoint.base_url)
    url = urlunsplit((base.scheme, base.netloc, base.path, urlencode(params), ""))

    # Re-parse the result and compare hosts
    produced = urlsplit(url)
    if produced.scheme != "https" or produced.hostname != endpoint.host:
        raise BlockedNavigationError(
            technical_message=f"Built URL host {produced.hostname!r} != {endpoint.host!r}"
        )

    logger.debug(f"Built pool URL on {network.value} for {address[:LOG_PREVIEW_LENGTH]}...")
    return url
