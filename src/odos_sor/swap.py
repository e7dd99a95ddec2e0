"""Swap context consumed by transaction building."""

from dataclasses import dataclass
from typing import Optional

from eth_utils import to_checksum_address

from odos_sor.chains import get_router_address
from odos_sor.errors import OdosInvalidAddressError


@dataclass(frozen=True)
class SwapContext:
    """Everything needed to assemble a swap without re-quoting.

    The path ID must come from a quote made for the same signer and
    tokens; that linkage is not checked here.

    Raises:
        OdosInvalidAddressError: If any address is malformed
    """

    signer_address: str
    output_recipient: str
    path_id: str
    router_address: str

    def __post_init__(self):
        # Normalize to checksum form
        for name in ("signer_address", "output_recipient", "router_address"):
            raw = getattr(self, name)
            try:
                address = to_checksum_address(raw)
            except (ValueError, TypeError) as e:
                raise OdosInvalidAddressError(f"Invalid {name}: {raw!r}") from e
            object.__setattr__(self, name, address)

    @classmethod
    def for_chain(
        cls,
        chain_id: int,
        signer_address: str,
        path_id: str,
        output_recipient: Optional[str] = None,
    ) -> "SwapContext":
        """Build a context using the known Odos router for ``chain_id``.

        The signer receives the output unless ``output_recipient`` is given.
        """
        return cls(
            signer_address=signer_address,
            output_recipient=output_recipient or signer_address,
            path_id=path_id,
            router_address=get_router_address(chain_id),
        )
