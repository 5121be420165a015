"""
Beacon API Client

This module provides a client for the consensus layer endpoint the fixtures
are generated from. It fetches light client data and the finalized beacon
state, and decodes each response into the Deneb SSZ containers.
"""

import logging
from typing import Any, Dict, List, Optional, Type

import requests
from pydantic import ValidationError

from ..config import BASE_CL_ENDPOINT, DEFAULT_TIMEOUT
from ..content.consensus import (
    BeaconStateSnapshot,
    Bootstrap,
    FinalityUpdate,
    OptimisticUpdate,
    UpdateRange,
)
from ..content.forks import CURRENT_FORK
from ..exceptions import DecodeError, TransportError
from ..models.api_models import BeaconResponse, FinalizedRootResponse
from ..ssz.containers import (
    BeaconState,
    LightClientBootstrap,
    LightClientFinalityUpdate,
    LightClientOptimisticUpdate,
    LightClientUpdate,
)
from ..ssz.containers.base import SSZContainer
from ..ssz.utils.hex_helpers import bytes_to_hex, hex_to_bytes

logger = logging.getLogger(__name__)


class BeaconAPIClient:
    """
    Client for a consensus layer beacon API behind Cloudflare access.

    One session is shared by every request; its headers carry the access
    credentials and are fixed at construction.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        base_url: str = BASE_CL_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the beacon API client.

        Args:
            client_id: Value of the CF-Access-Client-ID header
            client_secret: Value of the CF-Access-Client-Secret header
            base_url: Base URL for the beacon API
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self.session = requests.Session()
        self.session.headers.update({
            'Content-Type': 'application/json',
            'CF-Access-Client-ID': client_id,
            'CF-Access-Client-Secret': client_secret,
        })

        logger.info(f"Initialized BeaconAPIClient with base_url: {self.base_url}")

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET a path and return the decoded JSON body.

        Raises:
            TransportError: If the request fails or returns a non-2xx status
            DecodeError: If the body is not JSON
        """
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.ConnectionError as e:
            raise TransportError(
                f"Failed to connect to beacon API at {self.base_url}. "
                f"Original error: {e}"
            )
        except requests.Timeout as e:
            raise TransportError(
                f"Timeout after {self.timeout}s fetching {path} from {self.base_url}. "
                f"Original error: {e}"
            )
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}")

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response from {path} is not JSON: {e}")

    def _decode(self, payload: Any, container: Type[SSZContainer], path: str) -> Any:
        """
        Validate a {version, data} envelope and decode its data.

        Raises:
            DecodeError: If the envelope is malformed, the fork is not the
                current one or the data does not fit the container
        """
        try:
            envelope = BeaconResponse.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"Invalid response format from {path}: {e}")

        if envelope.version is not None and envelope.version != CURRENT_FORK.value:
            raise DecodeError(
                f"Expected a {CURRENT_FORK.value} payload from {path}, got {envelope.version}"
            )

        try:
            return container.from_json(envelope.data)
        except ValueError as e:
            raise DecodeError(f"Invalid {container.__name__} from {path}: {e}")

    def fetch_finalized_root(self) -> bytes:
        """
        Fetch the block root of the latest finalized block.

        Raises:
            TransportError, DecodeError
        """
        path = "/eth/v1/beacon/blocks/finalized/root"
        logger.info("Fetching finalized block root")
        payload = self._get(path)
        try:
            root = FinalizedRootResponse.model_validate(payload).data.root
        except ValidationError as e:
            raise DecodeError(f"Invalid response format from {path}: {e}")
        return hex_to_bytes(root)

    def fetch_bootstrap(self, block_root: bytes) -> Bootstrap:
        """
        Fetch the light client bootstrap for a block root.

        Args:
            block_root: 32-byte root of the block to bootstrap from

        Returns:
            Bootstrap paired with the root it was requested for
        """
        path = f"/eth/v1/beacon/light_client/bootstrap/{bytes_to_hex(block_root)}"
        logger.info(f"Fetching light client bootstrap for {bytes_to_hex(block_root)}")
        bootstrap = self._decode(self._get(path), LightClientBootstrap, path)
        return Bootstrap(block_root=block_root, bootstrap=bootstrap)

    def fetch_finality_update(self) -> FinalityUpdate:
        path = "/eth/v1/beacon/light_client/finality_update"
        logger.info("Fetching light client finality update")
        return FinalityUpdate(update=self._decode(self._get(path), LightClientFinalityUpdate, path))

    def fetch_optimistic_update(self) -> OptimisticUpdate:
        path = "/eth/v1/beacon/light_client/optimistic_update"
        logger.info("Fetching light client optimistic update")
        return OptimisticUpdate(update=self._decode(self._get(path), LightClientOptimisticUpdate, path))

    def fetch_update_range(self, start_period: int, count: int = 1) -> UpdateRange:
        """
        Fetch the light client updates of `count` periods from `start_period`.

        The endpoint answers with a JSON array of {version, data} envelopes,
        one per period.

        Raises:
            TransportError, DecodeError
        """
        path = "/eth/v1/beacon/light_client/updates"
        logger.info(f"Fetching light client updates: start_period={start_period}, count={count}")
        payload = self._get(path, params={"start_period": start_period, "count": count})

        if not isinstance(payload, list) or not payload:
            raise DecodeError(f"Expected a non-empty JSON array from {path}")
        if len(payload) > count:
            raise DecodeError(f"Asked {path} for {count} updates, got {len(payload)}")

        updates: List[LightClientUpdate] = [
            self._decode(item, LightClientUpdate, path) for item in payload
        ]
        return UpdateRange(start_period=start_period, count=count, updates=updates)

    def fetch_beacon_state_finalized(self) -> BeaconStateSnapshot:
        """
        Fetch the finalized beacon state.

        This is by far the largest payload; it is only used to derive the
        historical summaries and their proof.
        """
        path = "/eth/v2/debug/beacon/states/finalized"
        logger.info("Fetching finalized beacon state")
        state = self._decode(self._get(path), BeaconState, path)
        logger.info(f"Successfully fetched beacon state for slot {state.slot}")
        return BeaconStateSnapshot(state=state)

    def health_check(self) -> bool:
        """
        Check if the beacon API is accessible.

        Returns:
            True if API is accessible, False otherwise
        """
        try:
            response = self.session.get(f"{self.base_url}/eth/v1/node/health", timeout=10)
            return response.ok
        except requests.RequestException as e:
            logger.warning(f"Health check against {self.base_url} failed: {e}")
            return False
