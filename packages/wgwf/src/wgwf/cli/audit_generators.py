from __future__ import annotations
import argparse, csv, json, logging, sys
from dataclasses import asdict
from pathlib import Path

from .common import ensure_dir, setup_logging
from wgproc import list_generators, register_all

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="worldgen - audit of registered generators")
    p.add_argument("--out", required=True, help="Output directory (csv/json)")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    register_all(verbose=args.verbose)
    infos = list_generators()
    out_dir = Path(args.out); ensure_dir(out_dir)

    (out_dir / "audit_generators.json").write_text(
        json.dumps({"generators": [asdict(i) for i in infos]}, ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    with open(out_dir / "audit_generators.csv", "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["name", "params", "deterministic"])
        for i in infos:
            w.writerow([i.name, ";".join(p.name for p in i.param_specs), i.deterministic])

    logging.info("Generators: %d", len(infos))
    return 0

if __name__ == "__main__":
    sys.exit(main())
