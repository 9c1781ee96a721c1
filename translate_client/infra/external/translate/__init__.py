"""Per-ecosystem clients for the Translate API."""

from translate_client.infra.external.translate.base import BaseTranslateClient, EndpointFetcher
from translate_client.infra.external.translate.cosmos import TranslateCOSMOS
from translate_client.infra.external.translate.evm import TranslateEVM
from translate_client.infra.external.translate.polkadot import TranslatePOLKADOT
from translate_client.infra.external.translate.svm import TranslateSVM
from translate_client.infra.external.translate.tvm import TranslateTVM
from translate_client.infra.external.translate.utxo import TranslateUTXO
from translate_client.infra.external.translate.xrpl import TranslateXRPL

ECOSYSTEM_CLIENTS: dict[str, type[BaseTranslateClient]] = {
    client.ecosystem: client
    for client in (
        TranslateEVM,
        TranslateSVM,
        TranslateUTXO,
        TranslateCOSMOS,
        TranslateTVM,
        TranslatePOLKADOT,
        TranslateXRPL,
    )
}

__all__ = [
    "ECOSYSTEM_CLIENTS",
    "BaseTranslateClient",
    "EndpointFetcher",
    "TranslateCOSMOS",
    "TranslateEVM",
    "TranslatePOLKADOT",
    "TranslateSVM",
    "TranslateTVM",
    "TranslateUTXO",
    "TranslateXRPL",
]
