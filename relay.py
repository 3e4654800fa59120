from dataclasses import dataclass

import requests


class RelayError(Exception):
    """Raised when the Gatekeeper Service could not be reached or answered badly."""


@dataclass(frozen=True)
class KeyRequest:
    key: str

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, dict) or not isinstance(data.get("toyProductionKey"), str):
            raise ValueError("toyProductionKey must be a string")
        return cls(key=data["toyProductionKey"])


@dataclass(frozen=True)
class AccessRequest:
    host_or_address: str
    secret: str

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, dict):
            raise ValueError("request body must be a JSON object")
        host = data.get("orderServiceHostOrIpAddress")
        secret = data.get("secretInput")
        if not isinstance(host, str) or not isinstance(secret, str):
            raise ValueError("orderServiceHostOrIpAddress and secretInput must be strings")
        return cls(host_or_address=host, secret=secret)

    def to_json(self):
        return {
            "orderServiceHostOrIpAddress": self.host_or_address,
            "secretInput": self.secret,
        }


def forward_access_request(access_request: AccessRequest, url: str, timeout: float) -> dict:
    """POST the access request to the Gatekeeper Service once and return its JSON body."""
    try:
        resp = requests.post(url, json=access_request.to_json(), timeout=timeout)
    except requests.RequestException as e:
        raise RelayError(f"failed to reach Gatekeeper Service: {e}") from e
    except ValueError as e:
        # urllib3 rejects timeouts <= 0 with a plain ValueError
        raise RelayError(f"invalid relay request: {e}") from e

    if resp.status_code != 200:
        raise RelayError(
            f"failed to access Gatekeeper Service, status code: {resp.status_code}"
        )

    try:
        return resp.json()
    except ValueError as e:
        raise RelayError(f"Gatekeeper Service returned a non-JSON body: {e}") from e
