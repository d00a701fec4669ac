"""Command line tool that regenerates a model-id Enum from ``GET /models``.

Credentials come from the environment (``OPENAI_API_KEY``, ``OPENAI_ORG_ID``
and optionally ``OPENAI_BASE_URL``) or a ``.env`` file. The generated module
is written to ``--output`` or printed to stdout.
"""
import argparse
import re
import sys
from pathlib import Path
from typing import Iterable, List, Optional

import httpx
from pydantic import ValidationError

from openai_descriptors.config import Settings, with_config
from openai_descriptors.core.transport import read_httpx_response, to_httpx_request
from openai_descriptors.errors import BadStatus, BadStatusBytes, DecodeError
from openai_descriptors.resources import model
from openai_descriptors.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def member_name(model_id: str) -> str:
    """Turn a model id such as ``gpt-3.5-turbo`` into ``GPT_3_5_TURBO``."""
    name = re.sub(r"[^0-9A-Za-z]+", "_", model_id).strip("_").upper() or "MODEL"
    if name[0].isdigit():
        name = "_" + name
    return name


def render_enum(model_ids: Iterable[str], class_name: str = "ModelId") -> str:
    """Render a Python module holding one Enum member per model id, sorted by id."""
    lines = [
        '"""Model ids available to the organization. Generated; do not edit."""',
        "from enum import Enum",
        "",
        "",
        f"class {class_name}(Enum):",
    ]
    seen = set()
    for model_id in sorted(set(model_ids)):
        name = member_name(model_id)
        candidate, suffix = name, 2
        while candidate in seen:
            candidate = f"{name}_{suffix}"
            suffix += 1
        seen.add(candidate)
        lines.append(f"    {candidate} = {model_id!r}")
    if not seen:
        lines.append("    pass")
    return "\n".join(lines) + "\n"


def fetch_model_ids(settings: Settings, transport: Optional[httpx.BaseTransport] = None) -> List[str]:
    """List model ids with a short-lived ``httpx.Client``."""
    request = with_config(settings.to_config(), model.list_models())
    with httpx.Client(transport=transport) as client:
        response = client.send(to_httpx_request(request))
        models = read_httpx_response(request, response)
    logger.info("models_listed", count=len(models))
    return [item.id for item in models]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openai-descriptors",
        description="List the models visible to your organization and write them as a Python Enum.",
    )
    parser.add_argument("-o", "--output", help="file to write; stdout when omitted")
    parser.add_argument("--class-name", default="ModelId", help="name of the generated Enum")
    return parser


def main(argv: Optional[List[str]] = None, transport: Optional[httpx.BaseTransport] = None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as exc:
        missing = ", ".join(f"OPENAI_{str(error['loc'][0]).upper()}" for error in exc.errors())
        print(f"missing or invalid settings: {missing}", file=sys.stderr)
        return 2

    # stdout may carry the generated module
    setup_logging(settings.log_level, stream=sys.stderr)

    try:
        model_ids = fetch_model_ids(settings, transport)
    except (BadStatus, BadStatusBytes, DecodeError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except httpx.HTTPError as exc:
        print(f"request failed: {exc}", file=sys.stderr)
        return 1

    source = render_enum(model_ids, args.class_name)
    if args.output:
        path = Path(args.output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        logger.info("enum_written", path=str(path), members=len(model_ids))
    else:
        sys.stdout.write(source)
    return 0
