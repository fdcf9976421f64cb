"""Option chain input services.

Re-exports the public loaders so consumers can import directly:
    from Gamma_Exposure.services import load_option_chain
"""

from Gamma_Exposure.services.option_chain import (
    load_option_chain,
    parse_option_chain,
    parse_option_chain_json,
)

__all__ = [
    "load_option_chain",
    "parse_option_chain",
    "parse_option_chain_json",
]
