"""Option chain parsing from brokerage JSON payloads.

Accepts either a bare JSON list of contract objects or the brokerage
envelope ``{"options": {"option": [...]}}``. The envelope's ``option`` may
also be a single object (one-contract chain) or null (no chain).

A malformed record is not skipped; the first bad record aborts the parse.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from Gamma_Exposure.models.options import OptionContract
from Gamma_Exposure.utils.exceptions import MalformedInputError

logger = logging.getLogger(__name__)

CHAIN_SOURCE: str = "chain"


def _unwrap_envelope(payload: object, *, source: str) -> list[object]:
    """Extract the list of raw contract records from *payload*."""
    if isinstance(payload, list):
        return payload

    if isinstance(payload, dict) and "options" in payload:
        options = payload["options"]
        if options is None:
            return []
        if not isinstance(options, dict):
            msg = f"Expected an object under 'options', got {type(options).__name__}"
            raise MalformedInputError(msg, source=source)

        records = options.get("option")
        if records is None:
            return []
        if isinstance(records, dict):
            return [records]
        if isinstance(records, list):
            return records
        msg = f"Expected a list under 'options.option', got {type(records).__name__}"
        raise MalformedInputError(msg, source=source)

    msg = "Option chain must be a JSON list or an {'options': {'option': [...]}} object"
    raise MalformedInputError(msg, source=source)


def parse_option_chain(payload: object, *, source: str = CHAIN_SOURCE) -> list[OptionContract]:
    """Validate decoded JSON into ``OptionContract`` models.

    Args:
        payload: Decoded JSON (list or brokerage envelope).
        source: Label used in error messages (e.g. the file name).

    Returns:
        Contracts in payload order.

    Raises:
        MalformedInputError: If the envelope is unrecognised or any record
            has an unparsable strike, date, option type, or open interest.
    """
    records = _unwrap_envelope(payload, source=source)

    contracts: list[OptionContract] = []
    for index, record in enumerate(records):
        try:
            contracts.append(OptionContract.model_validate(record))
        except ValidationError as exc:
            msg = f"Malformed contract at index {index} in {source}: {exc}"
            raise MalformedInputError(msg, source=source, index=index) from exc

    missing_greeks = sum(1 for contract in contracts if contract.greeks is None)
    logger.debug(
        "Parsed %d contracts from %s (%d without greeks)",
        len(contracts),
        source,
        missing_greeks,
    )
    return contracts


def parse_option_chain_json(data: str, *, source: str = CHAIN_SOURCE) -> list[OptionContract]:
    """Decode a JSON string and validate it as an option chain."""
    try:
        payload = json.loads(data)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {source}: {exc}"
        raise MalformedInputError(msg, source=source) from exc
    return parse_option_chain(payload, source=source)


def load_option_chain(path: Path | str) -> list[OptionContract]:
    """Read and validate an option chain JSON file.

    Raises:
        MalformedInputError: If the file cannot be read or does not parse.
    """
    chain_path = Path(path)
    try:
        data = chain_path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read option chain file {chain_path}: {exc}"
        raise MalformedInputError(msg, source=str(chain_path)) from exc

    contracts = parse_option_chain_json(data, source=chain_path.name)
    logger.info("Loaded %d contracts from %s", len(contracts), chain_path)
    return contracts
