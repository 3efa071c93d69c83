"""Write a JSON Schema file for every registered contract.

Consumers in other languages generate their types from these files.

Usage:
    python scripts/export_json_schemas.py -o build/schemas

    from scripts.export_json_schemas import export_schemas
    written = export_schemas("build/schemas")
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional

from shared_contracts.registry import ContractRegistry, default_registry
from shared_contracts.utils.logger_util import get_logger

logger = get_logger(__name__)


def export_schemas(out_dir: str | Path, registry: Optional[ContractRegistry] = None) -> List[Path]:
    """Write ``<Name>.schema.json`` per message and event schema. Returns the written paths."""
    registry = registry or default_registry
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    written = []
    for name in registry.schema_names():
        path = out / f"{name}.schema.json"
        path.write_text(json.dumps(registry.json_schema(name), indent=2, sort_keys=True) + "\n", encoding="utf-8")
        written.append(path)
    logger.info("wrote %d schema file(s) to %s", len(written), out)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("-o", "--out-dir", default="schemas", help="output directory (default: schemas)")
    args = parser.parse_args(argv)
    export_schemas(args.out_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
