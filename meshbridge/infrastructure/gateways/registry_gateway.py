"""Device registry gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from meshbridge.domain.entities.errors import RegistryUnavailableError
from meshbridge.domain.entities.registry import RegistryDevice
from meshbridge.domain.gateways.registry_gateway import IRegistryGateway
from meshbridge.shared import get_logger

logger = get_logger(__name__)

REGISTRY_API_PATH = "/api/registry/v1alpha1"


class HttpRegistryGateway(IRegistryGateway):
    """HTTP client for the device registry API."""

    def __init__(
        self,
        registry_url: str,
        token: Optional[str] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize the registry gateway.

        Args:
            registry_url: Base URL of the registry service
            token: Optional bearer token sent with every request
            timeout: Request timeout in seconds
        """
        self.registry_url = registry_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    def _devices_url(self, application: str) -> str:
        return (
            f"{self.registry_url}{REGISTRY_API_PATH}"
            f"/apps/{quote(application, safe='')}/devices"
        )

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def list_devices(
        self, application: str, labels: Optional[str] = None
    ) -> List[RegistryDevice]:
        """
        List devices of an application, optionally filtered by labels.

        Raises:
            RegistryUnavailableError: If the request fails or returns an error
        """
        url = self._devices_url(application)
        params = {"labels": labels} if labels else {}

        logger.info(
            "registry.devices.request",
            url=url,
            application=application,
            labels=labels,
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, headers=self._headers(), params=params)
                response.raise_for_status()
                devices = self._to_domain(response.json(), application)

        except httpx.HTTPStatusError as e:
            logger.error(
                "registry.devices.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
                exc_info=e,
            )
            raise RegistryUnavailableError(
                "list_devices",
                f"registry returned HTTP {e.response.status_code}: {e.response.text}",
                details={"application": application, "labels": labels},
            ) from e

        except httpx.RequestError as e:
            logger.error(
                "registry.devices.request_error",
                error=str(e),
                url=url,
                exc_info=e,
            )
            raise RegistryUnavailableError(
                "list_devices",
                f"failed to communicate with registry: {e}",
                details={"application": application, "labels": labels},
            ) from e

        except ValueError as e:
            logger.error(
                "registry.devices.invalid_response",
                error=str(e),
                url=url,
                exc_info=e,
            )
            raise RegistryUnavailableError(
                "list_devices",
                f"registry returned an unreadable response: {e}",
                details={"application": application, "labels": labels},
            ) from e

        logger.info(
            "registry.devices.response",
            count=len(devices),
            application=application,
        )
        return devices

    async def create_device(
        self, application: str, device: RegistryDevice
    ) -> RegistryDevice:
        """
        Create a device under an application.

        Raises:
            RegistryUnavailableError: If the registry does not accept the device
        """
        url = self._devices_url(application)
        payload = device.to_document()

        logger.info(
            "registry.device.create",
            url=url,
            application=application,
            device=device.name,
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, headers=self._headers(), json=payload)
                response.raise_for_status()

        except httpx.HTTPStatusError as e:
            logger.error(
                "registry.device.create_http_error",
                device=device.name,
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
                exc_info=e,
            )
            raise RegistryUnavailableError(
                "create_device",
                f"registry returned HTTP {e.response.status_code}: {e.response.text}",
                details={"application": application, "device": device.name},
            ) from e

        except httpx.RequestError as e:
            logger.error(
                "registry.device.create_request_error",
                device=device.name,
                error=str(e),
                url=url,
                exc_info=e,
            )
            raise RegistryUnavailableError(
                "create_device",
                f"failed to communicate with registry: {e}",
                details={"application": application, "device": device.name},
            ) from e

        logger.info(
            "registry.device.created",
            device=device.name,
            status_code=response.status_code,
        )
        return device

    def _to_domain(self, payload: Any, application: str) -> List[RegistryDevice]:
        """
        Convert a device listing into domain devices.

        Raises:
            ValueError: If the listing does not have the registry's shape
        """
        if payload is None:
            return []
        if isinstance(payload, dict):
            # Some registry versions wrap the list.
            payload = payload.get("items", payload.get("devices", []))
            if payload is None:
                return []
        if not isinstance(payload, list):
            raise ValueError(f"expected a list of devices, got {type(payload).__name__}")
        return [self._parse_device(item, application) for item in payload]

    def _parse_device(self, data: Any, application: str) -> RegistryDevice:
        if not isinstance(data, dict):
            raise ValueError(f"expected a device object, got {type(data).__name__}")
        metadata = self._ensure_mapping(data.get("metadata"), "metadata")
        spec = self._ensure_mapping(data.get("spec"), "spec")
        selector = self._ensure_mapping(spec.get("gatewaySelector"), "gatewaySelector")
        labels = self._ensure_mapping(metadata.get("labels"), "labels")
        return RegistryDevice(
            name=str(metadata.get("name", "")),
            application=str(metadata.get("application") or application),
            aliases=self._ensure_str_list(spec.get("alias")),
            gateway_names=self._ensure_str_list(selector.get("matchNames")),
            labels={str(key): str(value) for key, value in labels.items()},
        )

    def _ensure_mapping(self, payload: Any, field: str) -> Dict[str, Any]:
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise ValueError(f"device {field} must be an object")
        return payload

    def _ensure_str_list(self, payload: Any) -> List[str]:
        if not payload:
            return []
        if isinstance(payload, dict):
            payload = payload.get("aliases") or []
        if not isinstance(payload, list):
            raise ValueError("expected a list of names")
        return [str(item) for item in payload if item is not None]
