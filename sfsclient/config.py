"""Client start-up configuration and per-request parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .log import LoggingCallback

MAX_RETRIES = 3

TargetingAttributes = dict[str, str]


@dataclass
class ClientConfig:
    """Settings used to build a client.

    account_id identifies the caller and is required; instance_id and namespace
    fall back to service defaults when left unset. log_callback receives every
    log record on the calling thread and should return quickly.
    """

    account_id: str
    instance_id: Optional[str] = None
    namespace: Optional[str] = None
    log_callback: Optional[LoggingCallback] = None


@dataclass
class ProductRequest:
    """A product to look up, with optional targeting attributes."""

    product: str
    attributes: TargetingAttributes = field(default_factory=dict)


@dataclass
class RequestParams:
    """Parameters of one request to the service.

    Only a single product request is currently supported. When base_cv is not
    given a new correlation vector is generated. With retry_on_error the client
    retries a failed web request up to MAX_RETRIES times.
    """

    product_requests: list[ProductRequest] = field(default_factory=list)
    base_cv: Optional[str] = None
    retry_on_error: bool = True