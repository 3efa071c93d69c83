"""Static service location tables.

Base URLs are derived from the port alone; there is no host or URL override.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

SERVICE_HOST = "localhost"


class ServiceName(str, Enum):
    API_GATEWAY = "API_GATEWAY"
    AUTH_SERVICE = "AUTH_SERVICE"
    USER_SERVICE = "USER_SERVICE"
    ORDER_SERVICE = "ORDER_SERVICE"
    PAYMENT_SERVICE = "PAYMENT_SERVICE"
    NOTIFICATION_SERVICE = "NOTIFICATION_SERVICE"
    ANALYTICS_SERVICE = "ANALYTICS_SERVICE"


@dataclass(frozen=True)
class ServiceEndpoint:
    name: ServiceName
    port: int

    @property
    def base_url(self) -> str:
        return f"http://{SERVICE_HOST}:{self.port}"


SERVICE_PORTS: Mapping[str, int] = MappingProxyType({
    ServiceName.AUTH_SERVICE.value: 3001,
    ServiceName.USER_SERVICE.value: 3002,
    ServiceName.ORDER_SERVICE.value: 3003,
    ServiceName.PAYMENT_SERVICE.value: 3004,
    ServiceName.NOTIFICATION_SERVICE.value: 3005,
    ServiceName.API_GATEWAY.value: 3000,
    ServiceName.ANALYTICS_SERVICE.value: 3006,
})

SERVICE_ENDPOINTS: Mapping[str, ServiceEndpoint] = MappingProxyType({
    name: ServiceEndpoint(ServiceName(name), port) for name, port in SERVICE_PORTS.items()
})

SERVICE_URLS: Mapping[str, str] = MappingProxyType({
    name: endpoint.base_url for name, endpoint in SERVICE_ENDPOINTS.items()
})

