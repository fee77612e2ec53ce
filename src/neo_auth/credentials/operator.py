"""Network operator record attached to login requests and responses."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from ..core.validation import (
    require_absolute_url,
    require_instance,
    require_mapping,
    require_non_empty_string,
    require_number,
)


@dataclass(frozen=True)
class OperatorNft:
    """Membership token held by a network operator."""

    id: str
    serial_number: Union[int, float]

    def __post_init__(self) -> None:
        require_non_empty_string(self.id, "nft.id")
        require_number(self.serial_number, "nft.serialNumber")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OperatorNft":
        data = require_mapping(data, "nft")
        return cls(id=data.get("id"), serial_number=data.get("serialNumber"))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "serialNumber": self.serial_number}


@dataclass(frozen=True)
class Operator:
    """Node operator that served an authentication exchange.

    Handles ONLY the operator's identifying facts; reachability of ``url``
    is never checked here.
    """

    account_id: str
    public_key: str
    url: str
    nft: OperatorNft

    def __post_init__(self) -> None:
        require_non_empty_string(self.account_id, "operator.accountId")
        require_non_empty_string(self.public_key, "operator.publicKey")
        require_absolute_url(self.url, "operator.url")
        require_instance(self.nft, OperatorNft, "operator.nft")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Operator":
        data = require_mapping(data, "operator")
        return cls(
            account_id=data.get("accountId"),
            public_key=data.get("publicKey"),
            url=data.get("url"),
            nft=OperatorNft.from_dict(data.get("nft")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accountId": self.account_id,
            "publicKey": self.public_key,
            "url": self.url,
            "nft": self.nft.to_dict(),
        }
