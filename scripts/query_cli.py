#!/usr/bin/env python3
"""Run one Watson Discovery query from the command line and print the formatted passages.

Settings come from WATSON_DISCOVERY_* environment variables (a .env file is loaded first)
and the API key from IBM_IAM_API_KEY.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))

import httpx

from watson_discovery.core.config.env import get_env_vars, settings_inputs_from_env
from watson_discovery.core.config.loader import load_settings
from watson_discovery.core.contracts.node import NodeData
from watson_discovery.core.exceptions import ConfigurationError, ResponseShapeError, TransportError
from watson_discovery.credentials.ibm_iam import CREDENTIAL_NAME, EnvCredentialStore, get_credential_param
from watson_discovery.tools.discovery.adapter import DiscoveryQueryAdapter


def _trace_request(url: str, body: dict, trace: bool) -> None:
    if not trace:
        return
    print(f"[REQUEST] POST {url}", flush=True)
    print("[REQUEST BODY]", flush=True)
    print(json.dumps(body, indent=2), flush=True)
    print("---", flush=True)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Query a Watson Discovery project and print the matched passages.")
    parser.add_argument("query", nargs="*", help="Query text (or pass as single argument)")
    parser.add_argument("--env-file", default=".env", help="dotenv file to load before reading the environment")
    parser.add_argument("--count", type=int, default=None, help="Override WATSON_DISCOVERY_RESULT_COUNT")
    parser.add_argument("--collections", default=None, help="Comma separated collection IDs")
    parser.add_argument("--trace", action="store_true", help="Print the request URL and body before sending")
    parser.add_argument("--verbose", action="store_true", help="Log request timing and result counts")
    args = parser.parse_args(argv)
    query = " ".join(args.query).strip()
    if not query:
        print('Usage: python scripts/query_cli.py "Your question here"', file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    env = get_env_vars(args.env_file, Path.cwd())
    inputs = settings_inputs_from_env(env)
    if args.count is not None:
        inputs["resultCount"] = args.count
    if args.collections is not None:
        inputs["collectionIds"] = args.collections
    node_data = NodeData(inputs=inputs)
    api_key = get_credential_param(CREDENTIAL_NAME, EnvCredentialStore(env).get_credential_data(None), node_data)

    try:
        adapter = DiscoveryQueryAdapter(load_settings(node_data.inputs, api_key))
        _trace_request(adapter.build_url(), adapter.build_body(query), args.trace)
        text = adapter.query(query)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 1
    except (TransportError, ResponseShapeError) as e:
        print(e, file=sys.stderr)
        return 1
    except httpx.HTTPError as e:
        print(f"Cannot reach Watson Discovery: {e}", file=sys.stderr)
        return 1

    print(text if text else "No results.", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
